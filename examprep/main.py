import logging
import sys

from examprep.api.app import create_app
from examprep.config import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("examprep.main:app", host="0.0.0.0", port=8000, reload=True)
