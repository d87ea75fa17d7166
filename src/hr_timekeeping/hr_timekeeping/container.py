from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from .core.constants import DEFAULT_STANDARD_ENTRY, DEFAULT_STANDARD_EXIT, TEHRAN_OFFSET_MINUTES, TEHRAN_ZONE_NAME
from .deviation.calculator import DeviationCalculator, StandardTime
from .localtime.resolver import LocalTimeResolver, UtcOffsetPolicy
from .reports.repository import CommuteLogSource
from .reports.service import CommuteReportService
from .rollup.service import MonthlyRollup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    policy: UtcOffsetPolicy
    resolver: LocalTimeResolver
    deviation: DeviationCalculator
    rollup: MonthlyRollup

    standard_entry: StandardTime
    standard_exit: StandardTime

    def report_service(self, source: CommuteLogSource) -> CommuteReportService:
        return CommuteReportService(source, resolver=self.resolver, deviation=self.deviation, rollup=self.rollup)


def load_settings(settings_module: Optional[str] = None) -> ModuleType:
    """Import the settings module chosen by ``APP_ENV`` (after reading ``.env``)."""
    load_dotenv(override=False)
    if settings_module is None:
        from config import get_settings_module

        settings_module = get_settings_module()
    return importlib.import_module(settings_module)


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    settings = settings or load_settings()

    if getattr(settings, "DEBUG", False):
        logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "DEBUG"))

    policy = UtcOffsetPolicy(
        name=str(getattr(settings, "OFFSET_NAME", TEHRAN_ZONE_NAME)),
        offset_minutes=int(getattr(settings, "UTC_OFFSET_MINUTES", TEHRAN_OFFSET_MINUTES)),
    )
    resolver = LocalTimeResolver(policy)
    deviation = DeviationCalculator(resolver)
    rollup = MonthlyRollup(resolver=resolver, deviation=deviation)

    container = Container(
        policy=policy,
        resolver=resolver,
        deviation=deviation,
        rollup=rollup,
        standard_entry=StandardTime.parse(getattr(settings, "STANDARD_ENTRY", DEFAULT_STANDARD_ENTRY)),
        standard_exit=StandardTime.parse(getattr(settings, "STANDARD_EXIT", DEFAULT_STANDARD_EXIT)),
    )
    logger.debug(
        "Container ready: offset=%s(%+d min) standards=%s/%s",
        policy.name,
        policy.offset_minutes,
        container.standard_entry,
        container.standard_exit,
    )
    return container
