import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from backend.app.dependencies import get_config, get_network  # noqa: E402
from socialnet.network import SocialNetwork  # noqa: E402


def build_report(network: SocialNetwork, config: AppConfig) -> Dict[str, Any]:
    """
    Run the three network queries with the configured inputs.
    """
    targets = config.target_set()
    summary = network.reach_summary(config.message_keyword)

    return {
        "source": network.store.metadata.get("source"),
        "nodes": network.node_count(),
        "edges": network.edge_count(),
        "available_characteristics": sorted(network.get_available_characteristics()),
        "characteristic_counts": network.characteristic_counts(),
        "message": {
            "keyword": summary.keyword,
            "received": sorted(summary.received),
            "not_received": sorted(summary.not_received),
        },
        "targeted": {
            "characteristics": sorted(targets),
            "nodes": sorted(network.target_ads(targets)),
        },
        "dominance": [
            {
                "node": entry.node_id,
                "connections": entry.connections,
                "neighbors": sorted(entry.neighbors),
            }
            for entry in network.calculate_dominance_and_influence(targets)
        ],
    }


def main() -> int:
    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("socialnet.run")
    start = time.perf_counter()

    network = get_network()
    if not network.store.metadata.get("loaded"):
        logger.error(
            "no network loaded from %s: %s",
            config.data_path,
            network.store.metadata.get("load_error", "unknown error"),
        )
        return 1

    report = build_report(network, config)
    logger.info("report ready in %.3fs", time.perf_counter() - start)
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
