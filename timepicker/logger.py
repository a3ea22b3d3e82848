import os
import logging
from datetime import datetime

from .config import get_workflow_data_dir

LOG_FILENAME = 'workflow.log'


def setup_logger(name, testing=False):
    """Setup logger that can be toggled for testing"""
    logger = logging.getLogger(name)

    # Only setup handler if testing is enabled and none exists
    if testing and not logger.handlers:
        # Use common log file for all components
        log_file = os.path.join(get_workflow_data_dir(), LOG_FILENAME)

        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
                   for h in logging.root.handlers):
            handler = logging.FileHandler(log_file)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)

            # Add handler to root logger
            logging.root.addHandler(handler)
            logging.root.setLevel(logging.DEBUG)

            # Add startup marker to log
            logging.info('='*50)
            logging.info(f'Logging started at {datetime.now()}')
            logging.info('='*50)

    return logger
