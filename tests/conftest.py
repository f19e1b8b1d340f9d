import sys
from pathlib import Path

# Repo root on sys.path so `import charhex` / `import charhex_run` work without an install
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
