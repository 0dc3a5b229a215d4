import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get(
    "CONANBUILD_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".conanbuild", "logs"),
)


class Logger:
    def __init__(self, log_dir=LOG_DIR):
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError:
            # Read-only home (sandboxed builds): console only.
            self.log_file = None
        else:
            self.log_file = os.path.join(
                log_dir,
                f"conanbuild_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, stream=None, prefix="", show_timestamp=True):
        # stdout carries the cargo: directives
        stream = stream or sys.stderr
        if show_timestamp:
            timestamp = self._get_timestamp()
            log_message = f"[{timestamp}] [{level}] {prefix}{message}\n"
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)
        else:
            log_message = f"[{level}] {prefix}{message}\n"
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

        if self.log_file is None:
            return
        with open(self.log_file, "a") as f:
            f.write(log_message)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def step_info(self, message, indent=0):
        prefix = " " * indent
        self._log("", message, Fore.CYAN, prefix=prefix, show_timestamp=False)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file(log_dir=LOG_DIR):
    """Return the path to the latest log file."""
    if not os.path.isdir(log_dir):
        return None
    log_files = [os.path.join(log_dir, f) for f in os.listdir(log_dir) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
