import json

import pytest
from pydantic import ValidationError

from adapters.catalog import load_catalog, load_pairs
from core.domain.errors import InvalidFormatError
from core.domain.models import ComplianceGrade, ContrastPair
from core.services.audit import (
    AuditHooks,
    dedupe_pairs,
    match_catalog,
    resolve_swatches,
    run_audit,
    sanitize_label_for_filename,
)


def test_load_catalog(catalog_path):
    catalog = load_catalog(catalog_path)
    assert len(catalog.entries) == 4
    red = catalog.entries[1]
    assert red.identifier == "card-1"
    assert red.color == "#FF0000"
    assert red.category == "cards"


def test_load_catalog_accepts_flat_list(tmp_path):
    path = tmp_path / "flat.json"
    path.write_text(json.dumps([{"name": "Plain", "color": "#123456"}]), encoding="utf-8")
    assert load_catalog(path).entries[0].name == "Plain"


def test_load_catalog_rejects_bad_color(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"entries": [{"name": "Broken", "color": "#12"}]}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_catalog(path)


def test_load_pairs(pairs_path):
    pairs = load_pairs(pairs_path).pairs
    assert [p.label for p in pairs] == ["Body text", "Muted text", "Placeholder"]


def test_run_audit_grades_each_pair(pairs_path):
    report = run_audit(load_pairs(pairs_path).pairs)
    grades = [e.compliance.grade for e in report.entries]
    assert grades == [ComplianceGrade.AAA, ComplianceGrade.AA, ComplianceGrade.FAIL]
    assert len(report.passing) == 2
    assert [e.label for e in report.failing] == ["Placeholder"]


def test_run_audit_dedupes_and_reports_progress():
    pairs = [
        ContrastPair(foreground="#000000", background="#ffffff"),
        ContrastPair(foreground="000000", background="#FFFFFF", label="dup"),
    ]
    seen: list[tuple[int, int]] = []
    started: list[int] = []
    hooks = AuditHooks(started=started.append, progress=lambda done, total, _label: seen.append((done, total)))

    report = run_audit(pairs, hooks=hooks)

    assert len(report.entries) == 1
    assert started == [1]
    assert seen == [(1, 1)]
    assert len(run_audit(pairs, dedupe=False).entries) == 2


def test_dedupe_pairs_keeps_first():
    pairs = [
        ContrastPair(foreground="#abcdef", background="#000000", label="first"),
        ContrastPair(foreground="#ABCDEF", background="000000", label="second"),
    ]
    assert [p.label for p in dedupe_pairs(pairs)] == ["first"]


def test_run_audit_invalid_pair():
    with pytest.raises(InvalidFormatError):
        run_audit([ContrastPair(foreground="#zzzzzz", background="#ffffff")])


def test_match_catalog_uses_threshold_and_limit(catalog_path):
    entries = load_catalog(catalog_path).entries
    result = match_catalog("#FF0000", entries, threshold=60, limit=12)
    assert result.reference == "#ff0000"
    assert result.considered == 4
    assert [m.name for m in result.matches] == ["Red card", "Orange nav", "Gray badge"]
    assert result.matches[0].identifier == "card-1"
    assert result.placeholders == []


def test_resolve_swatches_fills_missing_colors(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"entries": [{"id": "abc", "name": "No color"}]}), encoding="utf-8")
    swatches, placeholders = resolve_swatches(load_catalog(path).entries)
    assert placeholders == ["No color"]
    assert swatches[0].identifier == "abc"
    assert swatches[0].color.startswith("#")


@pytest.mark.parametrize(
    "value, expected",
    [("My Pairs #1", "My-Pairs-1"), ("tokens.v2", "tokens.v2"), ("", "audit"), ("###", "audit")],
)
def test_sanitize_label_for_filename(value, expected):
    assert sanitize_label_for_filename(value) == expected
