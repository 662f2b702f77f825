"""Tests for descriptor parsing and signal projection."""

import pytest

from brandlens.classifier.descriptor import DescriptorError, ImageDescriptor
from brandlens.classifier.signals import build_signals
from brandlens.classifier.taxonomy import PageType, SourceType


class TestFromDict:
    def test_camel_case_keys(self):
        parsed = ImageDescriptor.from_dict({
            "url": "https://acme.com/logo.svg",
            "alt": "Acme",
            "width": "180",
            "height": 60,
            "inHeaderOrNav": True,
            "inAffiliateOrPartnerSection": 0,
            "offsetTop": 12,
            "sourceType": "SVG",
            "parentClasses": ["site-header", "nav"],
            "brandName": "Acme",
            "pageType": "Main",
            "legacyRole": "photo",
        })

        assert parsed == ImageDescriptor(
            url="https://acme.com/logo.svg",
            alt="Acme",
            width=180,
            height=60,
            in_header_or_nav=True,
            in_affiliate_or_partner_section=False,
            offset_top=12,
            source_type=SourceType.SVG,
            parent_classes=("site-header", "nav"),
            brand_name="Acme",
            page_type=PageType.MAIN,
            legacy_role="photo",
        )

    def test_snake_case_keys(self):
        parsed = ImageDescriptor.from_dict({
            "url": "https://acme.com/hero.jpg",
            "in_hero_or_above_fold": True,
            "color_count": 12,
            "phash": "0000000000000000",
        })
        assert parsed.in_hero_or_above_fold is True
        assert parsed.color_count == 12
        assert parsed.phash == "0000000000000000"

    def test_none_values_use_defaults(self):
        parsed = ImageDescriptor.from_dict({"url": "https://acme.com/a.png", "width": None, "alt": None})
        assert parsed.width is None
        assert parsed.alt is None

    def test_unknown_keys_ignored(self):
        parsed = ImageDescriptor.from_dict({"url": "https://acme.com/a.png", "naturalWidth": 10, "srcset": "x"})
        assert parsed == ImageDescriptor(url="https://acme.com/a.png")

    def test_unknown_source_type(self):
        parsed = ImageDescriptor.from_dict({"url": "https://acme.com/a.webp", "sourceType": "webp"})
        assert parsed.source_type is SourceType.UNKNOWN

    def test_string_flags(self):
        parsed = ImageDescriptor.from_dict({
            "url": "https://acme.com/a.png",
            "inHeaderOrNav": "false",
            "inFooter": "True",
            "inHeroOrAboveFold": 1,
            "inAffiliateOrPartnerSection": None,
        })
        assert parsed.in_header_or_nav is False
        assert parsed.in_footer is True
        assert parsed.in_hero_or_above_fold is True
        assert parsed.in_affiliate_or_partner_section is False

    @pytest.mark.parametrize("data", [
        {},
        {"url": ""},
        {"url": 42},
        {"url": "https://acme.com/a.png", "width": "wide"},
        {"url": "https://acme.com/a.png", "pageType": "blog"},
        {"url": "https://acme.com/a.png", "parentClasses": 5},
        {"url": "https://acme.com/a.png", "inHeaderOrNav": "maybe"},
        {"url": "https://acme.com/a.png", "inFooter": 2},
        "https://acme.com/a.png",
    ])
    def test_invalid(self, data):
        with pytest.raises(DescriptorError):
            ImageDescriptor.from_dict(data)


class TestSignals:
    def test_projection(self):
        signals = build_signals(ImageDescriptor(
            url="https://acme.com/img/Logo.PNG", width=200, height=100, page_type=PageType.TEAM,
        ))
        assert signals.filename == "logo.png"
        assert signals.area == 20000
        assert signals.aspect_ratio == 2.0
        assert signals.max_dimension == 200
        assert signals.page_type is PageType.TEAM

    @pytest.mark.parametrize("width,height", [(None, None), (0, 100), (100, None)])
    def test_unknown_dimensions(self, width, height):
        signals = build_signals(ImageDescriptor(url="https://acme.com/a.png", width=width, height=height))
        assert signals.has_dimensions() is False
        assert signals.area is None
        assert signals.max_dimension is None
