from .config import config
from .env import env
from .libs import libs
from .link import link
from .log import log
from .targets import targets
from .version import version
