import logging
import os
from datetime import datetime

LOG_FILE=f"{datetime.now().strftime('%m__%d__%Y__%H__%M__%S')}.log"

log_dir=os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
os.makedirs(log_dir, exist_ok=True)

LOG_PATH_FILE=os.path.join(log_dir, LOG_FILE)

logging.basicConfig(
    filename=LOG_PATH_FILE,
    format="[%(asctime)s] %(lineno)d %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
)
