import os
import sys
import logging

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname("/".join(os.path.abspath(__file__).split('/')[:-2])), "logs")
logging_path = os.path.join(logging_dir, "tubetrans.log")
os.makedirs(logging_dir, exist_ok=True)

console_handler = logging.StreamHandler(sys.stdout)

logging.basicConfig(
    level=logging.INFO,
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path, encoding="utf-8"),
        console_handler
    ]
)


def log_to_stderr():
    """Send console log output to stderr, keeping stdout for program output."""
    console_handler.setStream(sys.stderr)


logging = logging.getLogger('tubetrans')
