"""Command-line front end for generating, filtering and browsing signals.

Examples::

    siggen generate --type triangle --frequency 5 --points 20000 --noise 10 --median 5
    siggen generate --type sine --save
    siggen list
    siggen show 3 --max-points 500 --print-points
    siggen delete 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .analysis import MedianFilter, downsample, peak_to_peak, rms, value_range
from .config import AppPaths, SigGenConfig, ensure_valid, load_config
from .core import (
    CancellationToken,
    OperationCancelled,
    Signal,
    SignalDefaults,
    SignalParameters,
    SignalType,
)
from .core.background import start_task
from .dataio import SignalLibrary, SignalNotFoundError, SignalRepository
from .generators import SignalSynthesizer

logger = logging.getLogger(__name__)

# const for a bare --median flag; resolved to config.default_window_size
_CONFIG_WINDOW = "config"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="siggen", description="Signal generator")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML configuration file (default: <data root>/siggen.yaml)",
    )
    parser.add_argument(
        "--database",
        default=None,
        help="SQLAlchemy database URL for the signal library",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Synthesize a new signal")
    gen.add_argument(
        "--type",
        default=SignalType.SINE.value,
        choices=[t.value for t in SignalType],
        help="Waveform type (default: sine)",
    )
    gen.add_argument("--amplitude", type=float, default=SignalDefaults.AMPLITUDE)
    gen.add_argument("--frequency", type=float, default=SignalDefaults.FREQUENCY)
    gen.add_argument("--phase", type=float, default=SignalDefaults.PHASE, help="Radians")
    gen.add_argument("--points", type=int, default=SignalDefaults.POINT_COUNT)
    gen.add_argument(
        "--interval", type=float, default=SignalDefaults.TIME_INTERVAL, help="Seconds"
    )
    gen.add_argument("--noise", type=int, default=SignalDefaults.NOISE_LEVEL, help="Percent")
    gen.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible noise")
    gen.add_argument("--save", action="store_true", help="Store the result in the library")
    _add_processing_args(gen)

    sub.add_parser("list", help="List stored signals")

    show = sub.add_parser("show", help="Load a stored signal")
    show.add_argument("signal_id", type=int)
    _add_processing_args(show)

    remove = sub.add_parser("delete", help="Delete a stored signal")
    remove.add_argument("signal_id", type=int)
    return parser


def _add_processing_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--median",
        type=int,
        nargs="?",
        const=_CONFIG_WINDOW,
        default=None,
        help="Odd median window size (bare flag: default window from config)",
    )
    parser.add_argument(
        "--max-points",
        type=int,
        default=None,
        help="Display budget for downsampling (default: from config)",
    )
    parser.add_argument(
        "--print-points",
        action="store_true",
        help="Print time,value lines after the summary",
    )


def _summary(signal: Signal, shown: Signal) -> str:
    lo, hi = value_range(shown)
    lines = [
        signal.display_name,
        f"  points: {len(signal.points)}"
        + (f" (shown: {len(shown.points)})" if shown is not signal else ""),
        f"  noise: {signal.noise_level}%  created: {signal.created_at:%Y-%m-%d %H:%M:%S}",
        f"  rms: {rms(signal):.6g}  peak-to-peak: {peak_to_peak(signal):.6g}",
        f"  range: [{lo:.6g}, {hi:.6g}]",
    ]
    if signal.id is not None:
        lines.insert(0, f"#{signal.id}")
    return "\n".join(lines)


def _run_cancellable(func, *args, thread_name: str, **kwargs):
    """
    Run ``func`` on a background task and wait for it.

    Ctrl-C cancels the task's token and waits for the worker to stop
    before re-raising.
    """
    token = CancellationToken()
    task = start_task(func, *args, token=token, thread_name=thread_name, **kwargs)
    try:
        return task.result()
    except KeyboardInterrupt:
        token.cancel()
        task.wait()
        raise


def _process_and_print(signal: Signal, args: argparse.Namespace, config: SigGenConfig) -> Signal:
    if args.median is not None:
        window = config.default_window_size if args.median == _CONFIG_WINDOW else args.median
        signal = _run_cancellable(
            MedianFilter.from_config(config).apply,
            signal,
            window,
            thread_name="SigGenMedianFilter",
        )

    max_points = config.max_display_points if args.max_points is None else args.max_points
    shown = downsample(signal, max_points)
    print(_summary(signal, shown))
    if args.print_points:
        for point in shown.points:
            print(f"{point.time:.9g},{point.value:.9g}")
    return signal


def _cmd_generate(args: argparse.Namespace, config: SigGenConfig) -> Signal:
    params = SignalParameters(
        amplitude=args.amplitude,
        frequency=args.frequency,
        phase=args.phase,
        point_count=args.points,
        time_interval=args.interval,
        noise_level=args.noise,
    )
    ensure_valid(params)

    signal = _run_cancellable(
        SignalSynthesizer.from_config(config).synthesize,
        args.type,
        thread_name="SigGenSynthesizer",
        seed=args.seed,
        **params.to_request(),
    )
    return _process_and_print(signal, args, config)


def _open_library(args: argparse.Namespace, config: SigGenConfig) -> SignalLibrary:
    return SignalLibrary(SignalRepository(args.database or config.database_url))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config if args.config is not None else AppPaths().config_file
    try:
        config = load_config(config_path)
        logger.debug("Using config %s", config)
        if args.command == "generate":
            signal = _cmd_generate(args, config)
            if args.save:
                _open_library(args, config).save(signal)
                print(f"saved as #{signal.id}")
        elif args.command == "list":
            library = _open_library(args, config)
            for entry in library.load():
                print(f"#{entry.id}  {entry.display_name}  points={entry.point_count}  "
                      f"{entry.created_at:%Y-%m-%d %H:%M:%S}")
        elif args.command == "show":
            signal = _open_library(args, config).open(args.signal_id)
            _process_and_print(signal, args, config)
        elif args.command == "delete":
            if not _open_library(args, config).delete(args.signal_id):
                raise SignalNotFoundError(f"Signal {args.signal_id} not found")
            print(f"deleted #{args.signal_id}")
    except (ValueError, SignalNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OperationCancelled, KeyboardInterrupt):
        print("cancelled", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
