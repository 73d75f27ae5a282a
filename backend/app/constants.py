DEFAULTS = {
    # Network source read once at startup
    "DATA_PATH": "data/nodes.txt",
    # Line that separates the node section from the edge section
    "EDGES_MARKER": "edges",
    # Text encoding of the network source
    "FILE_ENCODING": "utf-8",
    # Root log level for the runner
    "LOG_LEVEL": "INFO",
    # Keyword posted by the runner report
    "MESSAGE_KEYWORD": "",
    # Space-separated characteristics used for targeting and dominance filtering
    "TARGET_CHARACTERISTICS": "",
}
