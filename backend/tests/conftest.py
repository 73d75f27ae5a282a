from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from backend.app.dependencies import get_config, get_network

from socialnet.network import SocialNetwork


SAMPLE_NETWORK = """\
1 music sports travel
2 music gaming
3 sports fitness travel
4 gaming tech
5 music travel food
edges
1 2
1 3
1 5
2 4
2 5
"""


@pytest.fixture()
def network() -> SocialNetwork:
    return SocialNetwork()


@pytest.fixture()
def network_file(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "nodes.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_network(network: SocialNetwork, network_file) -> SocialNetwork:
    report = network.load(network_file(SAMPLE_NETWORK))
    assert report.ok
    return network


@pytest.fixture()
def fresh_dependencies():
    get_config.cache_clear()
    get_network.cache_clear()
    yield
    get_config.cache_clear()
    get_network.cache_clear()
