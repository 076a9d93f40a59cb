# main.py
import argparse
import json
import sys

from campus_route.app.build import build, load_config
from campus_route.config.models import PlannerModel, ProviderJsonFileModel
from campus_route.io.api import handle_request
from campus_route.io.planner_logging import default_json_logger


def run(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plan eco and safe campus routes.")
    p.add_argument("from_lat", type=float)
    p.add_argument("from_lng", type=float)
    p.add_argument("to_lat", type=float)
    p.add_argument("to_lng", type=float)
    p.add_argument("--mode", default="walk", help="walk | cycle | other")
    p.add_argument("--graph", help="graph store export (campus_nodes / campus_edges JSON)")
    p.add_argument("--config", help="planner config JSON")
    p.add_argument("--log", action="store_true", help="emit JSON planner logs on stderr")
    args = p.parse_args(argv)

    cfg = load_config(args.config) if args.config else PlannerModel()
    if args.graph:
        cfg = cfg.model_copy(update={"provider": ProviderJsonFileModel(file=args.graph)})

    # stdout carries only the response document
    logger = None
    if args.log:
        logger = default_json_logger("campus_route.cli", cfg.log.level, stream=sys.stderr)
        logger.propagate = False
    app = build(cfg, use_logging=args.log, logger=logger)
    status, body = handle_request(
        {
            "from_lat": args.from_lat,
            "from_lng": args.from_lng,
            "to_lat": args.to_lat,
            "to_lng": args.to_lng,
            "mode": args.mode,
        },
        app,
    )
    json.dump(body, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(run())
