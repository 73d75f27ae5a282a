from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Bulk loading
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoaderConfig:
    """
    Controls how the two-section network text format is read.
    """

    # Line that switches parsing from the node section to the edge section.
    edges_marker: str = "edges"
    encoding: str = "utf-8"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SocialNetConfig:
    """
    Root configuration object for socialnet.

    Constructed explicitly and passed to the network handle; never global.
    """

    loader: LoaderConfig = field(default_factory=LoaderConfig)
