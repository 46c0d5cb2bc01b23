#!/usr/bin/env python3

import os
import logging

# Load environment variables from .env file if it exists
if os.path.exists('.env'):
    from dotenv import load_dotenv
    load_dotenv()
    logging.info("Environment variables loaded from .env file")

# Set up logging
logging.basicConfig(level=logging.INFO)

try:
    from suistone import create_app
    application = create_app()
    app = application
    logging.info("SuiStone application loaded successfully")
except Exception as e:
    logging.error(f"Error loading application: {e}")
    raise

if __name__ == "__main__":
    application.run(port=int(os.environ.get('PORT', 5000)))
