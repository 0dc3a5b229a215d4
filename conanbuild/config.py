import toml
import os
from .cli_logger import logger

CONFIG_FILE = "conanbuild.toml"
SECTION = "conanbuild"

DEFAULTS = {
    "target": None,
    "manifest": "conanbuildinfo.json",
    "env_dir": None,
    "host_prefix": True,
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def settings(conf):
    """The ``[conanbuild]`` table of ``conf`` with defaults filled in."""
    result = dict(DEFAULTS)
    section = conf.get(SECTION, {})
    if isinstance(section, dict):
        result.update({k: v for k, v in section.items() if k in DEFAULTS})
    # `conanbuild config set` stores plain strings
    if isinstance(result["host_prefix"], str):
        result["host_prefix"] = result["host_prefix"].strip().lower() in ("1", "true", "yes", "on")
    return result
