import pytest

from tags.transform import (
    Tag,
    is_safe_text,
    is_valid_pair,
    is_valid_token,
    pair_to_tag,
    transform_pairs,
    truncate,
)


def make_pair(pair_id="0xabc", symbol0="WXDAI", name0="Wrapped XDAI", symbol1="HNY", name1="Honey"):
    return {
        "id": pair_id,
        "createdAtTimestamp": "1600000000",
        "txCount": "42",
        "token0": {"id": "0x01", "symbol": symbol0, "name": name0},
        "token1": {"id": "0x02", "symbol": symbol1, "name": name1},
    }


def test_valid_pair_is_mapped_to_tag():
    tag = pair_to_tag("100", make_pair())

    assert tag == Tag(
        contract_address="eip155:100:0xabc",
        public_name_tag="WXDAI/HNY Pool",
        project_name="Honeyswap",
        ui_website_link="https://honeyswap.org",
        public_note="The liquidity pool contract on Honeyswap for the Wrapped XDAI (WXDAI) / Honey (HNY) pair.",
    )
    assert tag.to_dict()["Contract Address"] == "eip155:100:0xabc"
    assert list(tag.to_dict()) == [
        "Contract Address",
        "Public Name Tag",
        "Project Name",
        "UI/Website Link",
        "Public Note",
    ]


@pytest.mark.parametrize(
    "value, max_length, expected",
    [
        ("HNY", 20, True),
        ("A" * 20, 20, True),
        ("A" * 21, 20, False),
        ("", 20, False),
        (None, 20, False),
        (123, 20, False),
        ("<script>evil</script>", 50, False),
        ("<b>", 20, False),
        ("a < b", 20, True),
        ("<>", 20, True),
        ("x > y", 20, True),
    ],
)
def test_is_safe_text(value, max_length, expected):
    assert is_safe_text(value, max_length) is expected


def test_token_rejections():
    assert is_valid_token({"symbol": "HNY", "name": "Honey"})
    assert not is_valid_token({"symbol": "AAAAAAAAAAAAAAAAAAAAA", "name": "Long"})
    assert not is_valid_token({"symbol": "EVIL", "name": "<script>evil</script>"})
    assert not is_valid_token({"symbol": "", "name": "Empty"})
    assert not is_valid_token({"name": "No symbol"})
    assert not is_valid_token({"symbol": "N", "name": "N" * 51})
    assert not is_valid_token(None)
    assert not is_valid_token("HNY")


def test_pair_rejected_when_either_token_invalid():
    assert is_valid_pair(make_pair())
    assert not is_valid_pair(make_pair(symbol0="A" * 21))
    assert not is_valid_pair(make_pair(name1="<img src=x>"))
    assert not is_valid_pair(make_pair(pair_id=""))
    assert not is_valid_pair({"id": "0x1", "token0": {"symbol": "A", "name": "A"}})
    assert not is_valid_pair(None)


def test_label_truncated_to_45_characters():
    tag = pair_to_tag("100", make_pair(symbol0="A" * 46, name0="Long", symbol1="B", name1="Bee"))

    label = tag.public_name_tag[: -len(" Pool")]
    assert tag.public_name_tag.endswith(" Pool")
    assert len(label) == 45
    assert label.endswith("...")
    assert label == "A" * 42 + "..."


def test_truncate_keeps_short_text():
    assert truncate("A" * 45) == "A" * 45
    assert truncate("WXDAI/HNY") == "WXDAI/HNY"
    assert truncate("A" * 46) == "A" * 42 + "..."


def test_transform_filters_and_keeps_order():
    pairs = [
        make_pair(pair_id="0x1"),
        make_pair(pair_id="0x2", symbol0=""),
        make_pair(pair_id="0x3", symbol1="GNO", name1="Gnosis"),
        {"garbage": True},
        make_pair(pair_id="0x4", name0="<script>evil</script>"),
    ]

    tags = transform_pairs("100", pairs)

    assert [t.contract_address for t in tags] == ["eip155:100:0x1", "eip155:100:0x3"]
    assert tags[1].public_name_tag == "WXDAI/GNO Pool"


def test_transform_is_idempotent():
    pair = make_pair()
    assert transform_pairs("100", [pair]) == transform_pairs("100", [pair])


def test_transform_empty_page():
    assert transform_pairs("100", []) == []
