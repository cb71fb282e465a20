"""Pricing pipeline - runs stages over one CalculatedPriceBuilder."""

import logging
from typing import Callable, Iterable

from django.utils.module_loading import import_string

from .calculated_price import CalculatedPrice, CalculatedPriceBuilder
from .conf import get_stage_paths
from .context import CalculatorContext
from .exceptions import PricingStageError

logger = logging.getLogger(__name__)

Stage = Callable[[CalculatorContext, CalculatedPriceBuilder], None]


class PricingPipeline:
    """Ordered list of pricing stages.

    Usage:
        pipeline = PricingPipeline.from_settings()
        price = pipeline.calculate(CalculatorContext(product=product))

    Each stage receives the context and the shared builder. The pipeline
    never retries: a failing stage propagates its exception.
    """

    def __init__(self, stages: Iterable[Stage]):
        self.stages = list(stages)

    @classmethod
    def from_settings(cls) -> "PricingPipeline":
        """Build the pipeline from PRICING_STAGES.

        Raises:
            PricingStageError: If a configured path cannot be imported.
        """
        stages = []
        for path in get_stage_paths():
            try:
                stages.append(import_string(path))
            except ImportError as exc:
                raise PricingStageError(path, exc) from exc
        return cls(stages)

    def calculate(self, context: CalculatorContext) -> CalculatedPrice:
        """Run all stages and return the frozen result.

        Raises:
            InvalidArgumentError: If context or context.product is None.
        """
        builder = CalculatedPriceBuilder(context)

        for stage in self.stages:
            name = getattr(stage, "__name__", repr(stage))
            logger.debug(f"Running pricing stage {name} for {context.product!r}")
            try:
                stage(context, builder)
            except Exception:
                logger.exception(f"Pricing stage {name} failed for {context.product!r}")
                raise

        return builder.build()
