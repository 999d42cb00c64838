"""Registry of message key variants.

Variants are registered explicitly at application startup, either one by
one (``register`` works as a class decorator) or by walking the subclass
tree of a base key (``register_subclasses``). ``discover_all`` turns the
registered variant set into a mapping from canonical identifier to a
representative instance.

Example:
    registry = KeyRegistry()

    @registry.register
    class Welcome(MessageKey):
        pass

    registry.discover_all()  # {"welcome": Welcome()}
"""

import inspect
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Type

from swiftbase.i18n.errors import InstantiationError
from swiftbase.i18n.keys import MessageKey
from swiftbase.logging import get_module_logger

logger = get_module_logger()


def canonical_identifier(variant: Type[MessageKey], namespace: str = "") -> str:
    """Compute the canonical identifier of a variant.

    Args:
        variant: MessageKey subclass.
        namespace: Optional dot-separated prefix. Discovery always passes an
            empty namespace, so registered identifiers are flat.

    Returns:
        Lower-cased simple class name, prefixed with ``namespace.`` when a
        namespace is given.
    """
    name = variant.__name__.lower()
    return f"{namespace}.{name}" if namespace else name


def is_grouping(variant: Type[MessageKey]) -> bool:
    """Check whether a class only groups other keys.

    The marker is read from the class body, so subclasses of a grouping
    class are concrete unless they declare it again.
    """
    return bool(vars(variant).get("__abstract__", False)) or inspect.isabstract(
        variant
    )


def instantiate(variant: Type[MessageKey]) -> MessageKey:
    """Create the zero-argument representative instance of a variant.

    Raises:
        InstantiationError: If the variant cannot be default-constructed.
    """
    try:
        return variant()
    except Exception as e:
        raise InstantiationError(variant, e) from e


class KeyRegistry:
    """Explicit, thread-safe registry of MessageKey variants.

    Attributes:
        debug: When True, every mapping is logged at INFO instead of DEBUG.
    """

    def __init__(
        self,
        variants: Iterable[Type[MessageKey]] = (),
        debug: bool = False,
    ):
        self.debug = debug
        self._variants: List[Type[MessageKey]] = []
        self._lock = threading.Lock()
        self._cache: Optional[Dict[str, MessageKey]] = None
        for variant in variants:
            self.register(variant)

    def register(self, variant: Type[MessageKey]) -> Type[MessageKey]:
        """Register a variant. Usable as a class decorator.

        Args:
            variant: MessageKey subclass.

        Returns:
            The variant, unchanged.

        Raises:
            TypeError: If ``variant`` is not a MessageKey subclass.
        """
        if not (isinstance(variant, type) and issubclass(variant, MessageKey)):
            raise TypeError(f"{variant!r} is not a MessageKey subclass")

        with self._lock:
            if variant not in self._variants:
                self._variants.append(variant)
                self._cache = None
        return variant

    def register_subclasses(
        self, base: Type[MessageKey] = MessageKey
    ) -> List[Type[MessageKey]]:
        """Register every concrete subclass reachable from ``base``.

        A class that declares ``__abstract__ = True`` in its own body is a
        grouping class and is not registered; its subclasses still are.
        ABC-abstract classes are skipped as well. Any other class is
        registered, including one that has subclasses of its own.

        Args:
            base: Root of the subclass tree to walk (not registered itself).

        Returns:
            Variants found, in discovery order.
        """
        found: List[Type[MessageKey]] = []
        for variant in _walk_subclasses(base):
            if is_grouping(variant):
                continue
            self.register(variant)
            found.append(variant)

        logger.info(
            "registered_message_key_subclasses",
            base=base.__name__,
            variant_count=len(found),
        )
        return found

    @property
    def variants(self) -> List[Type[MessageKey]]:
        """Registered variants, in registration order."""
        with self._lock:
            return list(self._variants)

    def discover_all(self) -> Dict[str, MessageKey]:
        """Map every registered variant to its canonical identifier.

        Variants that cannot be default-constructed are logged and skipped.
        When two variants share an identifier the later one wins.

        Returns:
            Dict mapping identifier to representative instance, in
            registration order.
        """
        with self._lock:
            if self._cache is not None:
                return dict(self._cache)

            result: Dict[str, MessageKey] = {}
            for variant in self._variants:
                try:
                    instance = instantiate(variant)
                except InstantiationError as e:
                    logger.error(
                        "message_key_instantiation_failed",
                        variant=variant.__qualname__,
                        error=str(e.reason),
                    )
                    continue

                identifier = canonical_identifier(variant)
                previous = result.get(identifier)
                if previous is not None:
                    logger.warning(
                        "message_key_identifier_collision",
                        identifier=identifier,
                        replaced=type(previous).__qualname__,
                        variant=variant.__qualname__,
                    )
                result[identifier] = instance
                self._log_mapping(identifier, variant)

            self._cache = result
            return dict(result)

    def identifiers(self) -> List[str]:
        """Canonical identifiers of all constructible variants."""
        return list(self.discover_all())

    def get(self, identifier: str) -> Optional[MessageKey]:
        """Look up the representative instance for an identifier."""
        return self.discover_all().get(identifier)

    def clear(self) -> None:
        """Forget every registered variant.

        Primarily used for testing.
        """
        with self._lock:
            self._variants.clear()
            self._cache = None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.discover_all()

    def __len__(self) -> int:
        return len(self.discover_all())

    def _log_mapping(self, identifier: str, variant: Type[MessageKey]) -> None:
        if self.debug:
            logger.info(
                "mapped_message_key",
                identifier=identifier,
                variant=variant.__qualname__,
            )
        else:
            logger.debug(
                "mapped_message_key",
                identifier=identifier,
                variant=variant.__qualname__,
            )


def _walk_subclasses(base: type) -> Iterator[type]:
    seen = set()
    stack = list(reversed(base.__subclasses__()))
    while stack:
        cls = stack.pop()
        if cls in seen:
            continue
        seen.add(cls)
        yield cls
        stack.extend(reversed(cls.__subclasses__()))
