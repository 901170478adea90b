import os
from dotenv import load_dotenv
from ..utils.path_utils import PROJECT_ROOT, OUTPUT_DIR

# Load environment variables from .env file
env_path = PROJECT_ROOT / '.env'
load_dotenv(dotenv_path=env_path)

# CloudHealth settings
CLOUDHEALTH_ENDPOINT_URL = os.getenv("CLOUDHEALTH_ENDPOINT_URL", "https://chapi.cloudhealthtech.com/")
CLOUDHEALTH_API_KEY = os.getenv("CLOUDHEALTH_API_KEY")

# Request timeout in seconds, applied to every call
REQUEST_TIMEOUT = 20

# Default CSV export path
DEFAULT_EXPORT_PATH = os.getenv("DEFAULT_EXPORT_PATH", str(OUTPUT_DIR / "cost_history.csv"))

# Cost history report defaults for the command line
DEFAULT_REPORT_INTERVAL = os.getenv("DEFAULT_REPORT_INTERVAL", "monthly")
DEFAULT_REPORT_MEASURES = os.getenv("DEFAULT_REPORT_MEASURES", "cost")

# CSV Settings
CSV_DELIMITER = ";"
DECIMAL_SEPARATOR = ","  # European format
