import logging
import os
import pathlib

import bipartite_matching._models as models
import bipartite_matching._util as util

DEFAULT_CONFIG_PATH = "~/.config/bipartite-matching/config.toml"
LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

logger = logging.getLogger(__name__)


def config_path():
    config_file = os.environ.get("BIPARTITE_MATCHING_CONFIG")
    if not config_file:
        config_file = DEFAULT_CONFIG_PATH
    return pathlib.Path(config_file).expanduser()


def load_config(path=None):
    if path is None:
        path = config_path()

    if path.exists():
        config = util.toml_loads(path.read_text())
    else:
        logger.debug('Config file "%s" not found, using defaults', path)
        config = {}

    return models.Config.init_recursive(**config)


def log_level(config):
    return LOG_LEVEL_MAP[config.log_level]
