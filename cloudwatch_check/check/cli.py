"""Command-line interface to run a CloudWatch check.

This CLI validates arguments, resolves the measurement configuration (preset,
literal document, or ad-hoc namespace listing), builds the CloudWatch adapter
and runs the check once in the foreground. Result lines go to stdout; the
process exits with the monitoring-plugin state code (0 OK, 1 WARNING,
2 CRITICAL).

Usage
-----
    cloudwatch-check --preset EC2 --region us-east-1
    python -m cloudwatch_check.check.cli -N AWS/EC2 -M CPUUtilization -S Average
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..adapters.cloudwatch import CloudWatchAdapter, create_session
from ..config.models import AWSEnvSettings, AWSSettings, CheckConfig, EnvSettings
from ..domain.measurements import MeasurementConfiguration
from ..domain.presets import NONE_PRESET, get_preset, log_preset_status
from ..domain.utils.filters import parse_dimension_filters, split_list
from ..errors import ArgumentError, CloudWatchCheckError
from ..observability import resolve_level, setup_logging
from .engine import CheckRunner
from .models import CheckOptions

logger = logging.getLogger(__name__)


def build_parser(
    env: Optional[EnvSettings] = None, aws_env: Optional[AWSEnvSettings] = None
) -> argparse.ArgumentParser:
    """Build the argument parser, seeding defaults from the environment."""
    env = env or EnvSettings()
    aws_env = aws_env or AWSEnvSettings()
    parser = argparse.ArgumentParser(
        prog="cloudwatch-check",
        description="Collect AWS CloudWatch metrics as text exposition lines",
    )
    aws = parser.add_argument_group("AWS")
    aws.add_argument(
        "--region",
        default=aws_env.region,
        help="AWS Region to use (or set envvar AWS_REGION)",
    )
    aws.add_argument(
        "--profile",
        default=aws_env.profile,
        help="AWS credential profile (or set envvar AWS_PROFILE)",
    )
    aws.add_argument("--config-file", default="", help="AWS shared config file")
    aws.add_argument(
        "--credentials-file", default="", help="AWS shared credentials file"
    )

    parser.add_argument(
        "-P",
        "--preset",
        default=env.preset,
        help="The service preset to use (default: %(default)s)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=env.config,
        help="Measurement configuration JSON string, or @path to read a file",
    )
    parser.add_argument(
        "-o",
        "--output-config",
        action="store_true",
        help="Output the measurement configuration JSON instead of data",
    )
    parser.add_argument(
        "-N", "--namespace", default=env.namespace, help="CloudWatch metric namespace"
    )
    parser.add_argument(
        "-M",
        "--metric-filter",
        default=env.metric_filter,
        help="Limit results to the given metric name",
    )
    parser.add_argument(
        "-D",
        "--dimension-filters",
        default=env.dimension_filters,
        help='Comma separated dimension filters, e.g. "Name, SecondName=SecondValue"',
    )
    parser.add_argument(
        "-S",
        "--stats",
        default=env.stats,
        help="Comma separated statistics for ad-hoc mode (default: %(default)s)",
    )
    parser.add_argument(
        "-m",
        "--max-pages",
        type=int,
        default=env.max_pages,
        help="Maximum number of listing pages; 0 disables the limit",
    )
    parser.add_argument(
        "-p",
        "--period-minutes",
        type=int,
        default=env.period_minutes,
        help="Minutes of history used for each statistic",
    )
    parser.add_argument(
        "--recently-active",
        action="store_true",
        help="Only include metrics active in roughly the last three hours",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Only list metrics, do not fetch metric data",
    )
    parser.add_argument(
        "--error-on-missing",
        action="store_true",
        default=env.error_on_missing,
        help="Fail when a listed metric has no configuration entry",
    )
    parser.add_argument(
        "--with-metadata",
        action="store_true",
        help="Emit HELP and TYPE lines before each metric family",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[
            "CRITICAL",
            "ERROR",
            "WARNING",
            "INFO",
            "DEBUG",
        ],
        help="Logging level (overrides environment)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (once sets DEBUG and prints the run summary)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> CheckConfig:
    """Validate parsed arguments into the explicit run configuration.

    Raises
    ------
    ArgumentError
        If a value violates its constraint or ``@path`` cannot be read.
    """
    config_text = args.config or ""
    if config_text.startswith("@"):
        try:
            config_text = CheckConfig.read_config_text(Path(config_text[1:]))
        except OSError as exc:
            raise ArgumentError(f"unable to read --config file: {exc}") from exc
    try:
        return CheckConfig(
            preset=args.preset.strip() or NONE_PRESET,
            config_text=config_text,
            namespace=args.namespace.strip(),
            metric_filter=args.metric_filter.strip(),
            dimension_filters=split_list(args.dimension_filters),
            stats=split_list(args.stats),
            max_pages=args.max_pages,
            period_minutes=args.period_minutes,
            recently_active=args.recently_active,
            dry_run=args.dry_run,
            verbose=args.verbose > 0,
            error_on_missing=args.error_on_missing,
            output_config=args.output_config,
            with_metadata=args.with_metadata,
            aws=AWSSettings(
                region=args.region,
                profile=args.profile,
                config_file=args.config_file,
                credentials_file=args.credentials_file,
            ),
        )
    except ValidationError as exc:
        raise ArgumentError(f"invalid arguments: {_describe(exc)}") from exc


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def resolve_configuration(cfg: CheckConfig) -> MeasurementConfiguration:
    """Build the run's measurement configuration from the run settings.

    Raises
    ------
    UnknownPreset
        If the preset is not registered.
    ArgumentError
        If a document is combined with a service preset, or ad-hoc mode has
        nothing to narrow the listing with.
    InvalidFilterSyntax
        If a dimension filter expression is malformed.
    ConfigParseError
        If the literal document is malformed.
    """
    preset = get_preset(cfg.preset)
    filters = parse_dimension_filters(cfg.dimension_filters)

    if preset.name != NONE_PRESET:
        if cfg.config_text:
            raise ArgumentError(
                f"--config can only be used with preset {NONE_PRESET}, "
                f"not {preset.name}"
            )
        measurement = preset.build()
    elif cfg.config_text:
        measurement = MeasurementConfiguration.from_text(cfg.config_text)
    else:
        if not (cfg.namespace or cfg.metric_filter or cfg.dry_run):
            raise ArgumentError(
                "must select at least one of: --config, --namespace, "
                "--metric-filter, or --dry-run"
            )
        measurement = MeasurementConfiguration(
            namespace=cfg.namespace, default_stats=cfg.stats
        )

    if cfg.metric_filter:
        measurement.metric_filter = cfg.metric_filter
    measurement.add_dimension_filters(filters)
    logger.debug(
        "cli.configuration",
        extra={
            "preset": preset.name,
            "custom": bool(cfg.config_text),
            "adhoc": measurement.adhoc,
            "namespace": measurement.namespace,
        },
    )
    return measurement


def load_settings() -> Tuple[EnvSettings, AWSEnvSettings]:
    """Read the environment-provided settings.

    Raises
    ------
    ArgumentError
        If an environment value does not validate.
    """
    try:
        return EnvSettings(), AWSEnvSettings()
    except ValidationError as exc:
        raise ArgumentError(f"invalid environment: {_describe(exc)}") from exc


def _report(exc: CloudWatchCheckError) -> int:
    logger.debug("cli.fatal", exc_info=True)
    print(f"{exc.state.name}: {exc.message}")
    return int(exc.state)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``argv``, run one check and return the exit code."""
    try:
        env, aws_env = load_settings()
    except ArgumentError as exc:
        return _report(exc)
    parser = build_parser(env, aws_env)
    args = parser.parse_args(argv)

    # Apply early so subsequent imports use configured level
    setup_logging(
        resolve_level(args.log_level, args.verbose, env.log_level),
        sdk_debug=resolve_level(args.log_level, 0, env.log_level) == "DEBUG",
    )
    log_preset_status()

    try:
        cfg = config_from_args(args)
        measurement = resolve_configuration(cfg)
        # A configured region takes precedence over the client default
        session = create_session(
            region=measurement.region or cfg.aws.region,
            profile=cfg.aws.profile,
            config_file=cfg.aws.config_file,
            credentials_file=cfg.aws.credentials_file,
        )
        provider = CloudWatchAdapter.from_session(session)
        options = CheckOptions(
            max_pages=cfg.max_pages,
            period_minutes=cfg.period_minutes,
            recently_active=cfg.recently_active,
            dry_run=cfg.dry_run,
            verbose=cfg.verbose,
            error_on_missing=cfg.error_on_missing,
            output_config=cfg.output_config,
            with_metadata=cfg.with_metadata,
            region=provider.region,
        )
        result = CheckRunner(provider, measurement, options).run()
    except CloudWatchCheckError as exc:
        return _report(exc)
    return int(result.state)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint; exits with the check state code."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
