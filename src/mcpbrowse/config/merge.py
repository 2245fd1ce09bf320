"""Merging configuration fragments."""

from __future__ import annotations

from typing import Any

from .models import BrowserConfig, Config


def _set_fields(model: Config | BrowserConfig) -> dict[str, Any]:
    return {name: getattr(model, name) for name in model.model_fields_set}


def _merge_browser(base: BrowserConfig, overrides: BrowserConfig) -> BrowserConfig:
    fields = _set_fields(base) | _set_fields(overrides)
    fields["launch_options"] = {
        **base.launch_options,
        **overrides.launch_options,
        "assistant_mode": True,
    }
    fields["context_options"] = {
        **base.context_options,
        **overrides.context_options,
    }
    return BrowserConfig(**fields)


def merge_config(base: Config, overrides: Config) -> Config:
    """Merge ``overrides`` on top of ``base`` and return a new config.

    Every top-level field set in ``overrides`` replaces the one in ``base``
    wholesale, ``server`` included. ``browser`` is the exception: its plain
    fields, ``launch_options`` and ``context_options`` are each merged key by
    key. ``launch_options["assistant_mode"]`` is always forced to ``True``.
    """
    fields = _set_fields(base) | _set_fields(overrides)
    fields["browser"] = _merge_browser(base.browser, overrides.browser)
    return Config(**fields)
