from pathlib import Path

# Directory holding the cloudhealth package. For a checkout or an editable
# install this is the repository root; for a regular install it is the
# site-packages directory, so pass --output explicitly there.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_DIR = PROJECT_ROOT / "output"


def ensure_dir_exists(directory_path):
    """Create ``directory_path`` and its parents if missing."""
    if directory_path:
        Path(directory_path).mkdir(parents=True, exist_ok=True)
