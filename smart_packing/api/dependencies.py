from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator
import logging

from fastapi import FastAPI

from smart_packing.catalog import ItemCatalog, load_catalog
from smart_packing.core.config import PackingSettings
from smart_packing.core.generator import PackingListGenerator
from smart_packing.core.localization import Localizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> PackingSettings:
    return PackingSettings.from_env()


@lru_cache(maxsize=1)
def get_catalog() -> ItemCatalog:
    return load_catalog(get_settings().catalog_path)


@lru_cache(maxsize=8)
def get_localizer(language: str) -> Localizer:
    return Localizer(language)


@lru_cache(maxsize=1)
def get_generator() -> PackingListGenerator:
    settings = get_settings()
    return PackingListGenerator(
        get_catalog(),
        resolve_name=get_localizer(settings.locale),
        settings=settings,
    )


def generator_for_locale(locale: str) -> PackingListGenerator:
    """Shared generator, or a sibling resolving names in ``locale``."""
    generator = get_generator()
    if not locale or locale == generator.settings.locale:
        return generator
    return PackingListGenerator(
        generator.catalog,
        rule_engine=generator.rule_engine,
        pipeline=generator.pipeline,
        resolve_name=get_localizer(locale),
        settings=generator.settings,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    catalog = get_catalog()
    logger.info("Packing API ready with %s catalog items", len(catalog))
    try:
        yield
    finally:
        get_generator.cache_clear()
        get_localizer.cache_clear()
