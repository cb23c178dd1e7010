"""
API Configuration Module
Manages environment variables and webmate API endpoints
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class APIConfig:
    """Configuration class for webmate API endpoints and settings"""

    # Base URLs for different environments
    API_PROD_URL = os.getenv('WEBMATE_API_URL', 'https://app.webmate.io/api/v1')
    API_STAGING_URL = os.getenv('WEBMATE_STAGING_URL', '')
    API_LOCAL_URL = os.getenv('WEBMATE_LOCAL_URL', 'http://localhost:44444/api/v1')

    # Default environment (prod, staging, local)
    DEFAULT_ENV = os.getenv('WEBMATE_ENV', 'prod')

    # Credentials and project context
    USERNAME = os.getenv('WEBMATE_USERNAME', '')
    API_KEY = os.getenv('WEBMATE_API_KEY', '')
    PROJECT_ID = os.getenv('WEBMATE_PROJECT_ID', '')

    # Request timeout handed to the transport (in seconds)
    DEFAULT_TIMEOUT = float(os.getenv('WEBMATE_API_TIMEOUT', '30'))

    # Console log level for the SDK logger
    LOG_LEVEL = os.getenv('WEBMATE_LOG_LEVEL', 'WARNING')

    @classmethod
    def get_base_url(cls, env=None):
        """
        Get the base URL for the specified environment

        Args:
            env: Environment name (prod, staging, local). If None, uses DEFAULT_ENV

        Returns:
            str: Base URL for the environment
        """
        env = env or cls.DEFAULT_ENV
        env = env.lower()

        url_map = {
            'prod': cls.API_PROD_URL,
            'staging': cls.API_STAGING_URL,
            'local': cls.API_LOCAL_URL
        }

        return url_map.get(env, cls.API_PROD_URL)
