"""GoFritAI

Free tier reference and monitor for cloud providers.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import version

    __version__ = version("gofritai")
except ImportError:
    __version__ = "0.1.0"
__author__ = "GoFritAI"
