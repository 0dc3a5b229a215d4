import os
from .. import config as config_module
from ..conan import Conan


def load_conan(ctx):
    """Build a Conan for the project directory and target given on the command line."""
    path = os.path.abspath(ctx.obj["path"])
    conf = config_module.load_config(path=path)
    return Conan.from_env(start_dir=path, target=ctx.obj.get("target"), conf=conf)
