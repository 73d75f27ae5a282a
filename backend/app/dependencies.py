from functools import lru_cache
import logging
import time

from socialnet.network import SocialNetwork

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig.from_settings()


@lru_cache
def get_network() -> SocialNetwork:
    """
    The single network handle for this process, loaded once on first use.
    """
    logger = logging.getLogger("socialnet.startup")
    t0 = time.perf_counter()
    config = get_config()

    network = SocialNetwork(config=config.socialnet)
    network.store.metadata["loaded"] = False

    report = network.load(config.data_path)
    network.store.metadata["loaded"] = report.ok
    network.store.metadata["skipped_lines"] = [e.line_number for e in report.skipped]

    logger.info(
        "[startup] network load ok=%s nodes=%s edges=%s in %.3fs",
        report.ok,
        network.node_count(),
        network.edge_count(),
        time.perf_counter() - t0,
    )
    return network
