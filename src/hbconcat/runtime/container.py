from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from hbconcat.constants import ENV_LOG_JSON, ENV_LOG_LEVEL
from hbconcat.core.interfaces.classifier import ValueClassifierProtocol
from hbconcat.core.interfaces.options import OptionResolverProtocol
from hbconcat.core.interfaces.templating import TemplateEngineProtocol
from hbconcat.logging.factory import DefaultLoggerFactory
from hbconcat.rendering.execution import ConcatEngine
from hbconcat.rendering.template_engine import PybarsTemplateEngine


def _parse_level(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration blob used to seed the EngineBuilder."""
    logger: Optional[logging.Logger] = None
    json_logs: bool = False
    log_level: int = logging.WARNING

    # Optional DI overrides
    template_engine: Optional[TemplateEngineProtocol] = None
    classifier: Optional[ValueClassifierProtocol] = None
    option_resolver: Optional[OptionResolverProtocol] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'EngineConfig':
        """Read HBCONCAT_LOG_JSON / HBCONCAT_LOG_LEVEL from *env* (os.environ by default)."""
        env = os.environ if env is None else env
        return cls(
            json_logs=env.get(ENV_LOG_JSON) == "1",
            log_level=_parse_level(env.get(ENV_LOG_LEVEL), logging.WARNING),
        )


@dataclass
class EngineBuilder:
    """Composable builder that wires default collaborators into a ConcatEngine."""
    logger: Optional[logging.Logger] = None
    json_logs: bool = False
    log_level: int = logging.WARNING
    template_engine: Optional[TemplateEngineProtocol] = None
    classifier: Optional[ValueClassifierProtocol] = None
    option_resolver: Optional[OptionResolverProtocol] = None

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> 'EngineBuilder':
        """Build a new EngineBuilder from a single EngineConfig."""
        return cls(
            logger=cfg.logger,
            json_logs=cfg.json_logs,
            log_level=cfg.log_level,
            template_engine=cfg.template_engine,
            classifier=cfg.classifier,
            option_resolver=cfg.option_resolver,
        )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'EngineBuilder':
        return cls.from_config(EngineConfig.from_env(env))

    def build(self) -> ConcatEngine:
        """Materialize a ConcatEngine with the currently wired collaborators."""
        logger = self.logger
        if logger is None:
            factory = DefaultLoggerFactory(json_logs=self.json_logs, level=self.log_level)
            logger = factory.get_logger("engine")

        tpl_engine = self.template_engine or PybarsTemplateEngine(logger=logger.getChild("templates"))
        return ConcatEngine(
            template_engine=tpl_engine,
            classifier=self.classifier,
            option_resolver=self.option_resolver,
            logger=logger,
        )
