import sys
import os

# Set paths right away, not only in a fixture
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
paths = [
    os.path.join(BASE_DIR, 'src'),
]

for p in paths:
    if p not in sys.path:
        sys.path.insert(0, p)

os.environ.setdefault("API_URL", "http://localhost:50000/")
