#!/usr/bin/env python3
"""
Seed script to populate the gallery backend via its API.

Run:
    python seed/seed_photos.py \
      --backend-url http://localhost:8000 \
      --limit 4
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger

from gallery.infrastructure.adapters.http_adapter import HttpAdapter
from gallery.infrastructure.http.http_photo_store import HttpPhotoStore
from gallery.models.errors import FetchError
from gallery.models.form import PhotoForm
from gallery.utils.config import get_config

logger = Logger(service="seed")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed photos via the gallery API")

    parser.add_argument(
        "--backend-url",
        default=None,
        help="Backend base URL (defaults to GALLERY_BACKEND_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=4,
        help="Number of photos to seed",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=Path(__file__).parent / "data" / "photos.json",
        help="JSON file with a top-level 'photos' array",
    )

    return parser.parse_args(argv)


def load_sample_data(data_file: Path) -> dict[str, Any]:
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def seed_photos(argv: list[str] | None = None) -> int:
    """Create sample photos, then list them back. Returns the number saved."""
    args = parse_args(argv)
    data = load_sample_data(args.data_file)

    adapter = HttpAdapter(args.backend_url or get_config().backend_url)
    store = HttpPhotoStore(adapter)

    logger.info(
        "Starting seeding process",
        extra={"data_file": str(args.data_file), "limit": args.limit},
    )

    try:
        saved = 0
        for item in cast(list[dict[str, Any]], data.get("photos", []))[: args.limit]:
            form = PhotoForm(
                title=item.get("title", ""),
                description=item.get("description") or "",
                image_url=item.get("image_url", ""),
                tags=", ".join(item.get("tags", [])),
                featured=bool(item.get("featured", False)),
            )

            try:
                store.create_photo(form.to_draft())
            except FetchError as exc:
                logger.error(
                    "Failed to seed photo",
                    extra={"title": form.title, "status": exc.status_code},
                )
                continue

            saved += 1
            logger.info("Seeded photo", extra={"title": form.title})

        photos = store.list_photos(featured_only=False)
    finally:
        adapter.close()

    logger.info(
        "Seeding completed",
        extra={"saved": saved, "total_photos": len(photos)},
    )
    return saved


def main() -> None:
    try:
        seed_photos()
    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
