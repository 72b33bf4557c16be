"""Rule-based name filtering built on name predicates.

A NameFilter holds an ordered list of FilterRule entries. A name passes the
filter when every rule accepts it: include rules require the pattern to
match, exclude rules require it not to.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from namefilter.config import Config
from namefilter.errors import ConfigError, FilterRuleError
from namefilter.predicates import Predicate, conjunction, negate, string_contains

__all__ = ["FilterRule", "NameFilter"]


@dataclass(frozen=True)
class FilterRule:
    """A single name filter rule."""

    pattern: str
    exclude: bool = False
    description: str = ""

    def predicate(self) -> Predicate:
        """Build the predicate for this rule, negated for exclude rules."""
        matcher = string_contains(self.pattern)
        return negate(matcher) if self.exclude else matcher


class _RuleModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    pattern: str
    exclude: bool = False
    description: str = ""


def _parse_rules(raw_rules: Any) -> list[FilterRule]:
    if not isinstance(raw_rules, list):
        raise FilterRuleError(
            f"'rules' must be a list, got {type(raw_rules).__name__}"
        )

    rules: list[FilterRule] = []
    errors: list[dict[str, Any]] = []
    for i, raw_rule in enumerate(raw_rules):
        try:
            model = _RuleModel.model_validate(raw_rule)
        except PydanticValidationError as e:
            for err in e.errors():
                loc = "/".join(str(segment) for segment in err.get("loc", ()))
                errors.append(
                    {
                        "path": f"/rules/{i}/{loc}" if loc else f"/rules/{i}",
                        "message": err.get("msg", ""),
                    }
                )
            continue
        rules.append(
            FilterRule(
                pattern=model.pattern,
                exclude=model.exclude,
                description=model.description,
            )
        )

    if errors:
        raise FilterRuleError(
            f"{len(errors)} invalid filter rule field(s)", errors=errors
        )
    return rules


class NameFilter:
    """Ordered collection of filter rules evaluated as a conjunction.

    Thread safety:
        Internally synchronized. All public methods are safe to call
        concurrently; evaluation works on a snapshot of the rules.
    """

    def __init__(self, rules: list[FilterRule] | None = None) -> None:
        self._entries: list[tuple[FilterRule, Predicate]] = [
            (rule, rule.predicate()) for rule in rules or []
        ]
        self._config_path: str | None = None
        self._config_key: str = "filters"
        self._logger: logging.Logger = logging.getLogger("namefilter.filters")
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Config, key: str = "filters") -> NameFilter:
        """Build a filter from the ``<key>.rules`` section of a Config.

        A missing section yields a filter without rules.

        Raises:
            ConfigError: If the section is not a mapping.
            FilterRuleError: If any rule entry is malformed.
        """
        section = config.get(key)
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigError(
                f"'{key}' must be a mapping, got {type(section).__name__}"
            )
        name_filter = cls(_parse_rules(section.get("rules", [])))
        name_filter._config_path = config.path
        name_filter._config_key = key
        return name_filter

    @classmethod
    def load(cls, yaml_path: str, key: str = "filters") -> NameFilter:
        """Load filter rules from a YAML file.

        The file holds a mapping whose ``<key>`` entry contains a ``rules``
        list. Each rule has a ``pattern`` and optional ``exclude`` and
        ``description``.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid, or the file or its section
                is not a mapping.
            FilterRuleError: If any rule entry is malformed.
        """
        return cls.from_config(Config.load(yaml_path), key=key)

    @property
    def rules(self) -> list[FilterRule]:
        """A copy of the current rules."""
        with self._lock:
            return [rule for rule, _ in self._entries]

    def _snapshot(self) -> list[tuple[FilterRule, Predicate]]:
        with self._lock:
            return list(self._entries)

    def predicate(self) -> Predicate:
        """Return a predicate over the rules as they are now."""
        return conjunction(*(accept for _, accept in self._snapshot()))

    def matches(self, name: str) -> bool:
        """Check whether ``name`` passes every rule."""
        for rule, accept in self._snapshot():
            if not accept(name):
                self._logger.debug(
                    "Name filter: name=%s rejected by rule=%s",
                    name,
                    rule.description or rule.pattern,
                )
                return False
        self._logger.debug("Name filter: name=%s accepted", name)
        return True

    def filter(self, names: Iterable[str]) -> list[str]:
        """Return the names that pass the filter, in their original order."""
        accept = self.predicate()
        return [name for name in names if accept(name)]

    def add_rule(self, rule: FilterRule) -> None:
        """Append a rule."""
        entry = (rule, rule.predicate())
        with self._lock:
            self._entries.append(entry)

    def remove_rule(self, pattern: str) -> bool:
        """Remove the first rule with the given pattern.

        Returns:
            True if a rule was found and removed, False otherwise.
        """
        with self._lock:
            for i, (rule, _) in enumerate(self._entries):
                if rule.pattern == pattern:
                    self._entries.pop(i)
                    return True
            return False

    def reload(self) -> None:
        """Re-read the rules from the YAML file this filter was loaded from.

        Raises:
            ConfigError: If the filter was not loaded from a file.
        """
        with self._lock:
            config_path = self._config_path
            key = self._config_key
        if config_path is None:
            raise ConfigError("Cannot reload: filter was not loaded from a YAML file")
        reloaded = NameFilter.load(config_path, key=key)
        with self._lock:
            self._entries = reloaded._entries
