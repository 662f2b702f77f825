import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from brandlens.cli import app
from tests.helpers.image_factory import create_quadrant_image, create_solid_image


CRAWL = {
    "images": [
        {"url": "https://acme.com/img/acme-logo.svg", "width": 180, "height": 60,
         "inHeaderOrNav": True, "sourceType": "svg", "alt": "Acme"},
        {"url": "https://acme.com/img/footer-logo.png", "width": 200, "height": 100},
        {"url": "https://acme.com/img/logo-small.png", "width": 120, "height": 60},
        {"url": "https://acme.com/img/hero.jpg", "width": 1920, "height": 800, "inHeroOrAboveFold": True},
        {"url": "/img/office.jpg", "width": 600, "height": 400},
        {"url": "https://acme.com/icons/facebook.svg", "width": 32, "height": 32},
        {"url": "https://acme.com/assets/icons/phone.svg", "width": 24, "height": 24},
        {"url": "https://acme.com/team/jane.jpg", "width": 400, "height": 500, "alt": "Jane, Founder",
         "pageType": "team", "somethingElse": 1},
    ]
}


def write_crawl(tmp_path: Path, data=CRAWL) -> Path:
    path = tmp_path / "crawl.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def run(*args):
    runner = CliRunner()
    return runner.invoke(app, [str(arg) for arg in args])


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        """Test that --help shows usage information."""
        result = run("--help")
        assert result.exit_code == 0
        assert "classify" in result.stdout
        assert "probe" in result.stdout

    def test_classify_help(self):
        result = run("classify", "--help")
        assert result.exit_code == 0
        assert "--max-logos" in result.stdout


class TestClassifyCommand:
    def test_classify_prints_report(self, tmp_path):
        result = run("classify", write_crawl(tmp_path), "--base-url", "https://acme.com/about")
        assert result.exit_code == 0

        report = json.loads(result.stdout)
        assert [item["url"] for item in report["logos"]] == [
            "https://acme.com/img/acme-logo.svg",
            "https://acme.com/img/footer-logo.png",
        ]
        # The third logo is demoted ahead of the hero
        assert [item["url"] for item in report["brand_images"]] == [
            "https://acme.com/img/logo-small.png",
            "https://acme.com/img/hero.jpg",
            "https://acme.com/team/jane.jpg",
            "https://acme.com/img/office.jpg",
        ]
        assert {item["role"] for item in report["excluded"]} == {"social_icon", "icon"}
        assert report["summary"]["total"] == 8

    def test_relative_urls_skipped_without_base(self, tmp_path):
        result = run("classify", write_crawl(tmp_path))
        assert result.exit_code == 0
        assert json.loads(result.stdout)["summary"]["total"] == 7

    def test_max_logos(self, tmp_path):
        result = run("classify", write_crawl(tmp_path), "--max-logos", "1")
        assert result.exit_code == 0

        report = json.loads(result.stdout)
        assert len(report["logos"]) == 1
        assert report["logos"][0]["url"] == "https://acme.com/img/acme-logo.svg"

    def test_max_brand_images(self, tmp_path):
        result = run("classify", write_crawl(tmp_path), "--max-brand-images", "1")
        report = json.loads(result.stdout)
        # Overflow logos still land in the brand images
        assert len(report["brand_images"]) == 1
        assert report["summary"]["dropped"] > 0

    def test_override(self, tmp_path):
        result = run(
            "classify", write_crawl(tmp_path),
            "--override", "https://acme.com/assets/icons/phone.svg=brand_image",
        )
        assert result.exit_code == 0

        report = json.loads(result.stdout)
        phone = [item for item in report["brand_images"] if item["url"].endswith("phone.svg")]
        assert len(phone) == 1
        assert phone[0]["user_overridden"] is True
        assert phone[0]["original_role"] == "icon"
        assert report["icons"] == []

    def test_relative_override_resolves_against_base_url(self, tmp_path):
        crawl = [
            {"url": "/assets/icons/phone.svg", "width": 24, "height": 24},
            {"url": "/img/hero.jpg", "width": 1920, "height": 800},
        ]
        result = run(
            "classify", write_crawl(tmp_path, crawl),
            "--base-url", "https://acme.com/about",
            "--override", "/assets/icons/phone.svg=brand_image",
        )
        assert result.exit_code == 0

        report = json.loads(result.stdout)
        assert "https://acme.com/assets/icons/phone.svg" in [item["url"] for item in report["brand_images"]]
        assert report["icons"] == []

    @pytest.mark.parametrize("value", ["no-separator", "https://acme.com/a.png=mascot", "=logo"])
    def test_bad_override(self, tmp_path, value):
        result = run("classify", write_crawl(tmp_path), "--override", value)
        assert result.exit_code != 0

    def test_brand_name_and_page_type_defaults(self, tmp_path):
        crawl = [{"url": "https://acme.com/people/jane.jpg", "width": 400, "height": 500, "alt": "Founder"}]
        result = run("classify", write_crawl(tmp_path, crawl), "--page-type", "about", "--include-signals")
        assert result.exit_code == 0

        report = json.loads(result.stdout)
        assert report["brand_images"][0]["role"] == "team"
        assert report["brand_images"][0]["signals"]["page_type"] == "about"

    def test_brand_name_option(self, tmp_path):
        crawl = [{"url": "https://acme.com/img/acme.png", "width": 150, "height": 50, "alt": "Acme"}]
        result = run("classify", write_crawl(tmp_path, crawl), "--brand-name", "Acme")
        report = json.loads(result.stdout)
        assert report["logos"][0]["debug_info"]["matched_patterns"][-2:] == ["brand_match", "logo_size_range"]

    def test_no_dedup(self, tmp_path):
        crawl = [
            {"url": "https://acme.com/a.jpg", "width": 600, "height": 400, "phash": "0000000000000000"},
            {"url": "https://acme.com/b.jpg", "width": 600, "height": 400, "phash": "0000000000000001"},
        ]
        path = write_crawl(tmp_path, crawl)
        assert len(json.loads(run("classify", path).stdout)["brand_images"]) == 1
        assert len(json.loads(run("classify", path, "--no-dedup").stdout)["brand_images"]) == 2

    def test_out_file(self, tmp_path):
        out = tmp_path / "reports" / "guide.json"
        result = run("classify", write_crawl(tmp_path), "--out", out)
        assert result.exit_code == 0
        assert result.stdout.strip() == ""
        assert json.loads(out.read_text(encoding="utf-8"))["version"] == "1.0"

    def test_debug_flag_keeps_report(self, tmp_path):
        path = write_crawl(tmp_path)
        plain = json.loads(run("classify", path).stdout)
        traced = json.loads(run("classify", path, "--debug").stdout)
        assert traced["logos"] == plain["logos"]
        assert traced["brand_images"] == plain["brand_images"]


class TestClassifyErrors:
    def test_missing_file(self, tmp_path):
        result = run("classify", tmp_path / "missing.json")
        assert result.exit_code != 0

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "crawl.json"
        path.write_text("{not json", encoding="utf-8")
        assert run("classify", path).exit_code == 1

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "crawl.json"
        path.write_bytes(b"\xff\xfe[{\"url\": \"x\"}]")
        assert run("classify", path).exit_code == 1

    def test_missing_url(self, tmp_path):
        assert run("classify", write_crawl(tmp_path, [{"width": 10, "height": 10}])).exit_code == 1

    def test_bad_dimensions(self, tmp_path):
        crawl = [{"url": "https://acme.com/a.png", "width": "wide"}]
        assert run("classify", write_crawl(tmp_path, crawl)).exit_code == 1

    def test_not_a_list(self, tmp_path):
        assert run("classify", write_crawl(tmp_path, {"images": "nope"})).exit_code == 1


class TestProbeCommand:
    def test_probe_prints_descriptors(self, tmp_path):
        solid = create_solid_image(tmp_path / "solid.png", (100, 50))
        quad = create_quadrant_image(
            tmp_path / "quad.png", 64,
            [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)],
        )
        result = run("probe", solid, quad, "--brand-name", "Acme")
        assert result.exit_code == 0

        descriptors = json.loads(result.stdout)
        assert [d["width"] for d in descriptors] == [100, 64]
        assert [d["color_count"] for d in descriptors] == [1, 4]
        assert all(d["brand_name"] == "Acme" for d in descriptors)
        assert all(d["source_type"] == "raster" for d in descriptors)

    def test_probe_output_feeds_classify(self, tmp_path):
        out = tmp_path / "descriptors.json"
        solid = create_solid_image(tmp_path / "banner.png", (100, 50))
        assert run("probe", solid, "--out", out).exit_code == 0

        result = run("classify", out)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["summary"]["total"] == 1

    def test_probe_no_readable_files(self, tmp_path):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"nope")
        assert run("probe", bad).exit_code == 1
