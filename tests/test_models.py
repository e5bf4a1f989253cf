import dataclasses

import pytest

from mdview.domain.models import BlockKind, BlockMatch, Document


def test_document_defaults():
    d = Document(raw_text="", base_dir="")
    assert d.path is None
    assert d.eol == "\n"


def test_document_is_immutable(tmp_path):
    d = Document(raw_text="hi", base_dir=f"{tmp_path.as_posix()}/", path=tmp_path / "x.md")
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.raw_text = "changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "text, eol",
    [
        ("a\nb", "\n"),
        ("a\r\nb", "\r\n"),
        ("no breaks", "\n"),
    ],
)
def test_detect_eol(text, eol):
    assert Document.detect_eol(text) == eol


def test_block_kind_processing_order():
    assert [k for k in BlockKind] == [
        BlockKind.CODE_FENCE,
        BlockKind.HEADING,
        BlockKind.IMAGE,
        BlockKind.LIST_RUN,
    ]


def test_block_match_groups_default_empty():
    m = BlockMatch(raw_span="# x", kind=BlockKind.HEADING)
    assert m.groups == {}
