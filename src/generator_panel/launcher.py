#!/usr/bin/env python3
"""
Generator panel launcher.

Builds generator settings from the command line, opens the panel over them
and prints the committed values once the panel is closed. When no variant is
given the user picks one from a list first, starting on the variant from
the configuration file.

Usage:
    python3 -m generator_panel [--variant dual_slider|range_slider] [--enabled] [--low N] [--high N]
"""

import argparse
import logging
import sys
from dataclasses import asdict, dataclass, replace
from typing import List, Optional

from pick import pick

import generator_panel.labels as LABELS
from generator_panel import __version__
from generator_panel.configuration import Config, PanelVariant
from generator_panel.logger import Logger
from generator_panel.panel import PanelController, SettingsBinding

log = Logger().setup_logger('Launcher')

VARIANT_CHOICES = {
    PanelVariant.DUAL_SLIDER: LABELS.LAUNCHER_VARIANT_DUAL,
    PanelVariant.RANGE_SLIDER: LABELS.LAUNCHER_VARIANT_RANGE,
}

RESULT_LABELS = {
    PanelVariant.DUAL_SLIDER: (LABELS.LABEL_LOAD, LABELS.LABEL_BATTERY_FILL),
    PanelVariant.RANGE_SLIDER: (LABELS.LABEL_RANGE_LOW, LABELS.LABEL_RANGE_HIGH),
}


@dataclass
class GeneratorSettings:
    """Caller-owned generator settings edited by the panel."""

    enabled: bool = False
    low: int = 50
    high: int = 60


def percentage(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 100:
        raise argparse.ArgumentTypeError(f"{value} is not a percentage between 0 and 100")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="generator-panel", description=LABELS._(LABELS.LAUNCHER_DESCRIPTION))
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in PanelVariant],
        help="Panel layout; asked interactively when omitted",
    )
    parser.add_argument("--enabled", action="store_true", help="Start with the generator enabled")
    parser.add_argument("--low", type=percentage, default=50, help="Generator load, or low end of the range (%%)")
    parser.add_argument("--high", type=percentage, default=60, help="Battery fill, or high end of the range (%%)")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--verbose", action="store_true", help="Log every panel transition")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def choose_variant(default: PanelVariant = PanelVariant.DUAL_SLIDER) -> PanelVariant:
    """Let the user pick a variant, starting on the configured one."""
    variants = list(VARIANT_CHOICES)
    screen_options = [LABELS._(VARIANT_CHOICES[variant]) for variant in variants]
    _, selected_index = pick(
        screen_options,
        LABELS._(LABELS.LAUNCHER_PICK_VARIANT),
        default_index=variants.index(default),
    )
    return variants[int(selected_index)]


def print_settings(settings: GeneratorSettings, variant: PanelVariant) -> None:
    low_label, high_label = RESULT_LABELS[variant]
    print(LABELS._(LABELS.LAUNCHER_RESULT_TITLE))
    print(LABELS._(LABELS.LAUNCHER_RESULT_ENABLED).format(settings.enabled))
    print(LABELS._(LABELS.LAUNCHER_RESULT_LOW).format(LABELS._(low_label), settings.low))
    print(LABELS._(LABELS.LAUNCHER_RESULT_HIGH).format(LABELS._(high_label), settings.high))


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        Logger().set_level(logging.DEBUG)

    try:
        panel_config = Config.load(args.config).panel_config()
        variant = PanelVariant(args.variant) if args.variant else choose_variant(panel_config.variant)

        settings = GeneratorSettings(enabled=args.enabled, low=args.low, high=args.high)
        binding = SettingsBinding.from_attributes(settings, value_low="low", value_high="high")
        panel = PanelController(binding, config=replace(panel_config, variant=variant))
    except ValueError as e:
        # configuration errors and invalid key bindings
        print(LABELS._(LABELS.LAUNCHER_CONFIG_ERROR).format(e))
        sys.exit(1)

    log.info(LABELS.LOG_STARTING.format(asdict(settings)))
    try:
        panel.run()
    except KeyboardInterrupt:
        print(LABELS._(LABELS.LAUNCHER_INTERRUPTED))
        sys.exit(1)
    log.info(LABELS.LOG_FINISHED.format(asdict(settings)))

    print_settings(settings, variant)


if __name__ == "__main__":
    main()
