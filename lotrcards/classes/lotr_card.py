"""
LOTR Cards Singular Card Object
"""
from typing import Dict, Optional

from ..utils import sanitize_filename


class LotrCardObject:
    """
    LOTR Cards Singular Card Object
    """

    title: str
    set_no: str
    card_no: str
    image_url: str
    image_path: str
    image_name: str
    props: Dict[str, str]

    def __init__(
        self,
        title: str,
        set_no: str,
        card_no: str,
        image_url: str,
        image_path: str,
        image_name: str = "",
        props: Optional[Dict[str, str]] = None,
    ) -> None:
        self.title = title
        self.set_no = set_no
        self.card_no = card_no
        self.image_url = image_url
        self.image_path = image_path
        self.image_name = image_name
        self.props = props if props is not None else {}

    def __repr__(self) -> str:
        return f"LotrCardObject({self.card_id} {self.title!r})"

    @property
    def card_id(self) -> str:
        """
        Five digit catalog identifier, set then card number
        :return: Card identifier
        """
        return f"{self.set_no}{self.card_no}"

    def get_slug(self) -> str:
        """
        Filesystem safe version of the card title
        :return: Slug
        """
        return sanitize_filename(self.title)
