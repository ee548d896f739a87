import logging

import uvicorn

import config
from utils.config_validator import validate_or_exit
from utils.logging_config import setup_logging

# Initialize centralized logging configuration
setup_logging()
validate_or_exit(config)

if __name__ == '__main__':
    logging.info(f"🔧 [run.py] Starting API on {config.HOST}:{config.PORT}")
    # log_config=None keeps the handlers installed by setup_logging()
    uvicorn.run("app:app", host=config.HOST, port=config.PORT, log_config=None)
