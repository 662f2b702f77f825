import json
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

import typer

from .config import Settings
from .logging import get_logger
from .classifier.descriptor import DescriptorError, ImageDescriptor
from .classifier.model import ImageClassifier
from .classifier.taxonomy import PageType, coerce_role
from .dedup.urls import normalize_image_url
from .output.report import descriptor_to_dict, selection_to_dict, write_report_json
from .probe.images import probe_images
from .selection.pipeline import build_brand_guide

app = typer.Typer(help="BRANDLENS – brand image classifier for crawled websites", no_args_is_help=True)
logger = get_logger(__name__)


def _load_descriptors(path: Path) -> List[dict]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DescriptorError(f"Could not read descriptors from {path}: {exc}") from exc

    # Accept a bare list or a crawler payload with an "images" list
    if isinstance(data, dict):
        data = data.get("images", [])
    if not isinstance(data, list):
        raise DescriptorError(f"Expected a list of image descriptors in {path}")
    return data


def _parse_overrides(values: List[str], base_url: Optional[str] = None) -> Dict[str, str]:
    """Parse URL=ROLE pairs, resolving URLs the same way as image sources."""
    overrides = {}
    for value in values:
        url, sep, role = value.rpartition("=")
        if not sep or not url:
            raise typer.BadParameter(f"Override must look like URL=ROLE, got {value!r}")
        try:
            coerce_role(role)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        overrides[normalize_image_url(url, base_url) or url] = role
    return overrides


@app.command()
def classify(
    descriptors_path: Path = typer.Argument(..., exists=True, readable=True, help="JSON file with crawled image descriptors"),
    brand_name: Optional[str] = typer.Option(None, help="Brand name used for name matching"),
    page_type: Optional[PageType] = typer.Option(None, case_sensitive=False, help="Page type for descriptors that do not set one"),
    base_url: Optional[str] = typer.Option(None, help="Page URL used to resolve relative image sources"),
    max_logos: Optional[int] = typer.Option(None, min=0, help="Maximum number of logos (default 2)"),
    max_brand_images: Optional[int] = typer.Option(None, min=0, help="Maximum number of brand images (default 15)"),
    dedup: bool = typer.Option(True, "--dedup/--no-dedup", help="Drop duplicate images before separation"),
    override: List[str] = typer.Option([], "--override", help="Role override as URL=ROLE (repeatable); relative URLs resolve against --base-url"),
    include_signals: bool = typer.Option(False, help="Include raw signals in the report"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the report to this file"),
    debug: bool = typer.Option(False, "--debug", help="Log every classification decision"),
) -> None:
    """
    Classify crawled images and print the Brand Guide selection as JSON.
    """
    settings = Settings.from_env()
    if max_logos is not None:
        settings.max_logos = max_logos
    if max_brand_images is not None:
        settings.max_brand_images = max_brand_images
    settings.debug_classification = settings.debug_classification or debug

    overrides = _parse_overrides(override, base_url)

    try:
        raw = _load_descriptors(descriptors_path)
        descriptors = []
        for item in raw:
            descriptor = ImageDescriptor.from_dict(item)
            url = normalize_image_url(descriptor.url, base_url)
            if url is None:
                logger.warning(f"Skipping unresolvable image source: {descriptor.url}")
                continue
            descriptor = replace(
                descriptor,
                url=url,
                brand_name=descriptor.brand_name or brand_name,
                page_type=descriptor.page_type or page_type,
            )
            descriptors.append(descriptor)
    except DescriptorError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1)

    logger.info(f"Classifying {len(descriptors)} images")
    classifier = ImageClassifier(debug=settings.debug_classification, log=logger)
    selection = build_brand_guide(
        descriptors,
        settings=settings,
        classifier=classifier,
        overrides=overrides,
        dedup=dedup,
    )
    logger.info(
        f"Selected {len(selection.logos)} logos and {len(selection.brand_images)} of "
        f"{selection.brand_image_candidates} brand images; {len(selection.excluded)} excluded"
    )

    text = write_report_json(selection_to_dict(selection, include_signals), out)
    if out is None:
        typer.echo(text)


@app.command()
def probe(
    files: List[Path] = typer.Argument(..., help="Downloaded image files"),
    brand_name: Optional[str] = typer.Option(None, help="Brand name stored on each descriptor"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write descriptors to this file"),
) -> None:
    """
    Read local image files and print classifier descriptors as JSON.
    """
    descriptors = probe_images(files, brand_name=brand_name)
    if not descriptors:
        logger.error("None of the given files could be read as images")
        raise typer.Exit(code=1)

    logger.info(f"Probed {len(descriptors)}/{len(files)} images")
    text = write_report_json([descriptor_to_dict(d) for d in descriptors], out)
    if out is None:
        typer.echo(text)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
