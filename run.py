# run.py

import os
import logging
from dotenv import load_dotenv

# Set up logging to help diagnose issues
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Environment must be loaded before config.Config reads it
if not load_dotenv():
    logger.warning("No .env file found, using the process environment only")

from backerhub import create_app  # noqa: E402

try:
    logger.info("Starting app creation...")
    app = create_app()
    logger.info("App created successfully")
except Exception as e:
    logger.error(f"Failed to create app: {str(e)}")
    logger.error(f"Error type: {type(e).__name__}")
    raise

if __name__ == '__main__':
    logger.info("Starting Flask development server...")
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=int(os.environ.get('PORT', 8080)))
