import os
from dotenv import load_dotenv

load_dotenv()

# stemming
STEM_ALGORITHM = os.getenv("INVINDEX_STEM_ALGORITHM", "english")

# logging
LOG_LEVEL = os.getenv("INVINDEX_LOG_LEVEL", "INFO").upper()

# command-line tools
DATA_DIR = os.getenv("INVINDEX_DATA_DIR", "data")
TOP_TERMS = int(os.getenv("INVINDEX_TOP_TERMS", "20"))
if TOP_TERMS < 0:
    raise ValueError("INVINDEX_TOP_TERMS must be a non-negative integer.")
