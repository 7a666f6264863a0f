"""Tests for converting parse outcomes to storage records."""

from vimkeys.core import ir
from vimkeys.core.converter import to_external, to_storage_records
from vimkeys.core.parser import parse_config


class TestToExternal:
    def test_drops_parser_only_fields(self) -> None:
        external = to_external(parse_config("nnoremap <silent> H ^"))
        assert len(external) == 1
        assert set(external[0].model_dump()) == {"mode", "lhs", "rhs", "is_recursive"}

    def test_preserves_order_and_values(self, sample_vimrc: str) -> None:
        outcome = parse_config(sample_vimrc)
        external = to_external(outcome)
        assert [(e.mode, e.lhs, e.rhs, e.is_recursive) for e in external] == [
            (m.mode, m.lhs, m.rhs, m.is_recursive) for m in outcome.mappings
        ]

    def test_empty_outcome(self) -> None:
        assert to_external(ir.ParseOutcome()) == []


class TestStorageRecords:
    def test_storage_shape_uses_camel_case(self) -> None:
        records = to_storage_records(parse_config("nnoremap H ^\nimap jj <Esc>"))
        assert records == [
            {"mode": "normal", "lhs": "H", "rhs": "^", "isRecursive": False},
            {"mode": "insert", "lhs": "jj", "rhs": "<Esc>", "isRecursive": True},
        ]

    def test_operator_pending_value(self) -> None:
        records = to_storage_records(parse_config("onoremap ie :<C-u>normal! ggVG<CR>"))
        assert records[0]["mode"] == "operator-pending"
        assert records[0]["rhs"] == ":<C-u>normal! ggVG<CR>"
