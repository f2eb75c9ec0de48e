"""Validation and mapping of raw subgraph pairs into address tags."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from config import (
    MAX_LABEL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SYMBOL_LENGTH,
    PROJECT_NAME,
    WEBSITE_LINK,
)

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
ELLIPSIS = "..."


@dataclass(frozen=True)
class Tag:
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str

    def to_dict(self) -> dict[str, str]:
        return {
            "Contract Address": self.contract_address,
            "Public Name Tag": self.public_name_tag,
            "Project Name": self.project_name,
            "UI/Website Link": self.ui_website_link,
            "Public Note": self.public_note,
        }


def is_safe_text(value: Any, max_length: int) -> bool:
    """Return True for a non-empty string within ``max_length`` and free of markup."""
    if not isinstance(value, str) or not value:
        return False
    if len(value) > max_length:
        return False
    return HTML_TAG_PATTERN.search(value) is None


def is_valid_token(token: Any) -> bool:
    if not isinstance(token, Mapping):
        return False
    return is_safe_text(token.get("symbol"), MAX_SYMBOL_LENGTH) and is_safe_text(
        token.get("name"), MAX_NAME_LENGTH
    )


def is_valid_pair(pair: Any) -> bool:
    if not isinstance(pair, Mapping):
        return False
    pair_id = pair.get("id")
    if not isinstance(pair_id, str) or not pair_id:
        return False
    return is_valid_token(pair.get("token0")) and is_valid_token(pair.get("token1"))


def truncate(text: str, max_length: int = MAX_LABEL_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def pair_to_tag(chain_id: str, pair: Mapping[str, Any]) -> Tag:
    """Map a pair already accepted by :func:`is_valid_pair` to its tag."""
    token0, token1 = pair["token0"], pair["token1"]
    symbols = truncate(f"{token0['symbol']}/{token1['symbol']}")
    return Tag(
        contract_address=f"eip155:{chain_id}:{pair['id']}",
        public_name_tag=f"{symbols} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the "
            f"{token0['name']} ({token0['symbol']}) / "
            f"{token1['name']} ({token1['symbol']}) pair."
        ),
    )


def transform_pairs(chain_id: str, pairs: Iterable[Any]) -> list[Tag]:
    """Drop invalid pairs and map the others to tags, keeping input order."""
    return [pair_to_tag(chain_id, pair) for pair in pairs if is_valid_pair(pair)]
