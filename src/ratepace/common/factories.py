# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Registries mapping an enum value to the class that implements it.

Usage::

    @RateControllerFactory.register(RateControlType.REPLAY)
    class ReplayRateController(BaseRateController):
        ...

    controller = RateControllerFactory.create_instance(RateControlType.REPLAY, **kwargs)
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ratepace.common.enums import RateControlType
from ratepace.common.exceptions import FactoryCreationError
from ratepace.common.protocols import RateControllerProtocol
from ratepace.common.ratepace_logger import RatePaceLogger

ClassEnumT = TypeVar("ClassEnumT", bound=str)
ClassProtocolT = TypeVar("ClassProtocolT", bound=Any)


class RatePaceFactory(Generic[ClassEnumT, ClassProtocolT]):
    """Base factory. Each subclass keeps its own registry of enum value -> class.

    When the same value is registered twice, the registration with the higher
    `override_priority` wins.
    """

    _logger: RatePaceLogger
    _registry: dict[ClassEnumT, type[ClassProtocolT]]
    _override_priorities: dict[ClassEnumT, int]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._logger = RatePaceLogger(cls.__name__)
        cls._registry = {}
        cls._override_priorities = {}

    @classmethod
    def register(
        cls, class_type: ClassEnumT, override_priority: int = 0
    ) -> Callable[[type[ClassProtocolT]], type[ClassProtocolT]]:
        """Register a class for the given enum value."""

        def decorator(class_cls: type[ClassProtocolT]) -> type[ClassProtocolT]:
            existing_priority = cls._override_priorities.get(class_type)
            if existing_priority is None or override_priority > existing_priority:
                if existing_priority is not None:
                    cls._logger.warning(
                        f"{class_type!r} class {cls._registry[class_type].__name__} "
                        f"overridden by {class_cls.__name__} with priority {override_priority}"
                    )
                cls._registry[class_type] = class_cls
                cls._override_priorities[class_type] = override_priority
            else:
                cls._logger.debug(
                    lambda: f"Ignoring {class_cls.__name__} for {class_type!r}, "
                    f"{cls._registry[class_type].__name__} has a higher priority"
                )
            return class_cls

        return decorator

    @classmethod
    def get_class_from_type(cls, class_type: ClassEnumT) -> type[ClassProtocolT]:
        """Get the class registered for the given enum value.

        Raises:
            FactoryCreationError: If no class is registered for the value.
        """
        if class_type not in cls._registry:
            raise FactoryCreationError(
                f"No implementation found for {class_type!r} in {cls.__name__}. "
                f"Registered types: {sorted(str(t) for t in cls._registry)}"
            )
        return cls._registry[class_type]

    @classmethod
    def get_all_class_types(cls) -> list[ClassEnumT]:
        return list(cls._registry)

    @classmethod
    def create_instance(cls, class_type: ClassEnumT, **kwargs: Any) -> ClassProtocolT:
        """Create an instance of the class registered for the given enum value."""
        return cls.get_class_from_type(class_type)(**kwargs)


class RateControllerFactory(RatePaceFactory[RateControlType, RateControllerProtocol]):
    """Factory for creating rate controllers based on the rate control type."""
