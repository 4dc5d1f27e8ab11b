"""Generate workouts from the command line.

Usage:
    python -m wod_cli.generate --structure couplet
    python -m wod_cli.generate --structure triplet --count 5 --json
    python -m wod_cli.generate --structure single --simulate 10000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from wod_engine.config.weights import WEIGHT_VERSIONS, get_weight_config
from wod_engine.describe.labels import (
    get_duration_bucket_label,
    get_format_label,
    get_modality_label,
)
from wod_engine.describe.prompt import build_workout_prompt
from wod_engine.exceptions import WeightConfigError
from wod_engine.generator import WorkoutGenerator
from wod_engine.math.distribution import observed_frequencies, sample_workouts
from wod_engine.models.trace import GenerationTrace
from wod_engine.models.workout import GeneratedWorkout
from wod_engine.serialization.storage import to_storage_dict

from wod_cli.config import DEFAULT_STRUCTURE, LOG_LEVEL, SEED, WEIGHTS_VERSION

logger = logging.getLogger(__name__)


def format_workout(workout: GeneratedWorkout) -> str:
    """Plain-text block for one workout."""
    modalities = ", ".join(get_modality_label(m) for m in workout.modality_combination)
    lines = [
        workout.display_name,
        f"  Modalities:  {modalities or '-'}",
        f"  Time domain: {get_duration_bucket_label(workout.duration_bucket)}",
        f"  Format:      {get_format_label(workout.workout_format)}",
    ]
    return "\n".join(lines)


def format_trace(trace: GenerationTrace) -> str:
    lines = [f"  Trace ({trace.weights_version}, {trace.draw_count} draws):"]
    for record in trace.records:
        value = "fixed" if record.value is None else f"r={record.value:.4f}"
        lines.append(f"    {record.stage.name:<12} {record.table:<22} {value:<9} -> {record.outcome}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted random workout generator")
    parser.add_argument(
        "--structure",
        default=DEFAULT_STRUCTURE,
        help="single, couplet, triplet or chipper (unknown values fall back to single)",
    )
    parser.add_argument("--count", type=int, default=1, help="Number of workouts")
    parser.add_argument("--seed", type=int, default=SEED, help="Seed for reproducible output")
    parser.add_argument(
        "--weights",
        default=WEIGHTS_VERSION,
        help=f"Weight table version ({', '.join(sorted(WEIGHT_VERSIONS))})",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Emit storage JSON")
    output.add_argument("--prompt", action="store_true", help="Emit a copyable prompt")
    output.add_argument(
        "--simulate",
        type=int,
        metavar="N",
        help="Sample N workouts and print observed frequencies",
    )
    parser.add_argument("--trace", action="store_true", help="Show every draw")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        weights = get_weight_config(args.weights)
    except WeightConfigError as exc:
        logger.error("%s", exc)
        return 2

    if args.count < 1:
        logger.error("--count must be at least 1, got %d", args.count)
        return 2

    if args.simulate is not None and args.simulate < 1:
        logger.error("--simulate must be at least 1, got %d", args.simulate)
        return 2

    generator = WorkoutGenerator(weights=weights, seed=args.seed)

    if args.simulate is not None:
        frame = sample_workouts(generator, args.structure, args.simulate)
        for column in ("structure", "leading", "duration", "format"):
            print(f"== {column}")
            print(observed_frequencies(frame, column).round(4).to_string())
        return 0

    results = [generator.generate_with_trace(args.structure) for _ in range(args.count)]

    if args.json:
        payload = [to_storage_dict(workout) for workout, _ in results]
        print(json.dumps(payload if len(payload) > 1 else payload[0], indent=2))
        return 0

    blocks = []
    for workout, trace in results:
        block = build_workout_prompt(workout) if args.prompt else format_workout(workout)
        if args.trace:
            block = f"{block}\n{format_trace(trace)}"
        blocks.append(block)
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
