"""Tests for JSON report generation."""

import json

from brandlens.classifier.model import classify_image, classify_images
from brandlens.classifier.taxonomy import PageType, SourceType
from brandlens.output.report import (
    REPORT_VERSION,
    descriptor_to_dict,
    result_to_dict,
    selection_to_dict,
    write_report_json,
)
from brandlens.selection.separate import separate_logos_and_brand_images
from tests.helpers.image_factory import descriptor


def sample_selection():
    return separate_logos_and_brand_images(classify_images([
        descriptor("logo.png", width=200, height=100),
        descriptor("hero.jpg", width=1920, height=800),
        descriptor("icons/phone.svg", width=24, height=24),
    ]))


class TestDescriptorToDict:
    def test_unset_fields_are_dropped(self):
        data = descriptor_to_dict(descriptor("logo.png", width=200, height=100, page_type=PageType.MAIN))
        assert data == {
            "url": "https://example.com/logo.png",
            "width": 200,
            "height": 100,
            "in_header_or_nav": False,
            "in_footer": False,
            "in_hero_or_above_fold": False,
            "in_affiliate_or_partner_section": False,
            "source_type": "unknown",
            "page_type": "main",
        }

    def test_parent_tuples_become_lists(self):
        data = descriptor_to_dict(descriptor("logo.svg", parent_classes=("site-header", "nav"),
                                             source_type=SourceType.SVG))
        assert data["parent_classes"] == ["site-header", "nav"]
        assert data["source_type"] == "svg"


class TestResultToDict:
    def test_plain_types(self):
        data = result_to_dict(classify_image(descriptor("logo.png", width=200, height=100)))

        assert data["role"] == "logo"
        assert data["category"] == "logos"
        assert data["display_priority"] == 1002
        assert data["debug_info"]["size_category"] == "tiny"
        assert "filename_logo" in data["debug_info"]["matched_patterns"]
        assert "signals" not in data
        json.dumps(data)

    def test_include_signals(self):
        data = result_to_dict(classify_image(descriptor("logo.png", width=200, height=100)), include_signals=True)
        assert data["signals"]["filename"] == "logo.png"
        assert data["signals"]["area"] == 20000


class TestSelectionToDict:
    def test_structure(self):
        report = selection_to_dict(sample_selection())

        assert report["version"] == REPORT_VERSION
        assert "generated_at" in report
        assert [item["role"] for item in report["logos"]] == ["logo"]
        assert [item["role"] for item in report["brand_images"]] == ["hero"]
        assert [item["role"] for item in report["icons"]] == ["icon"]
        assert [item["role"] for item in report["excluded"]] == ["icon"]

    def test_summary(self):
        summary = selection_to_dict(sample_selection())["summary"]

        assert summary["total"] == 3
        assert summary["displayed"] == 2
        assert summary["excluded"] == 1
        assert summary["logos"] == 1
        assert summary["brand_images"] == 1
        assert summary["brand_image_candidates"] == 1
        assert summary["dropped"] == 0


class TestWriteReportJson:
    def test_returns_text_without_path(self):
        text = write_report_json({"a": 1}, None)
        assert json.loads(text) == {"a": 1}

    def test_writes_file(self, tmp_path):
        out = tmp_path / "nested" / "report.json"
        text = write_report_json(selection_to_dict(sample_selection()), out)

        assert out.exists()
        assert json.loads(out.read_text(encoding="utf-8")) == json.loads(text)

    def test_unicode_is_kept(self, tmp_path):
        out = tmp_path / "report.json"
        write_report_json({"alt": "Café Ünïcode"}, out)
        assert "Café Ünïcode" in out.read_text(encoding="utf-8")
