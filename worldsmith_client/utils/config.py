#!/usr/bin/env python
# Configuration for the Worldsmith terminal client
import os
import json
import logging
import argparse

logger = logging.getLogger(__name__)


class Config:
    """Configuration management for the Worldsmith client"""

    # Default values
    DEFAULT_SERVER_URL = "http://localhost:8000"
    DEFAULT_USER_ID = 1
    DEFAULT_TIMEOUT = 10.0

    def __init__(self, config_file: str = None):
        self.server_url = self.DEFAULT_SERVER_URL
        self.default_user_id = self.DEFAULT_USER_ID
        self.timeout = self.DEFAULT_TIMEOUT
        self.config_file = config_file or os.path.expanduser("~/.worldsmith/config.json")

        # Load config if exists
        self.load_config()

    def load_config(self):
        """Load configuration from file if it exists"""
        if not os.path.exists(self.config_file):
            return
        try:
            with open(self.config_file, 'r') as f:
                config_data = json.load(f)
            self.server_url = config_data.get('server_url', self.DEFAULT_SERVER_URL)
            self.default_user_id = int(config_data.get('default_user_id', self.DEFAULT_USER_ID))
            self.timeout = float(config_data.get('timeout', self.DEFAULT_TIMEOUT))
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading config from {self.config_file}: {e}")

    def save_config(self):
        """Save current configuration to file"""
        config_data = {
            'server_url': self.server_url,
            'default_user_id': self.default_user_id,
            'timeout': self.timeout
        }
        try:
            os.makedirs(os.path.dirname(self.config_file), exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(config_data, f, indent=2)
        except OSError as e:
            logger.warning(f"Error saving config to {self.config_file}: {e}")

    def parse_args(self, argv=None):
        """Parse command line arguments"""
        parser = argparse.ArgumentParser(description='Worldsmith campaign manager client')
        parser.add_argument('--server-url', help='API server URL', default=self.server_url)
        parser.add_argument('--user-id', type=int, help='User that owns newly created worlds',
                            default=self.default_user_id)
        parser.add_argument('--save', action='store_true', help='Remember these settings')
        parser.add_argument('--verbose', action='store_true', help='Log requests to stderr')

        args = parser.parse_args(argv)

        # Update config with command line values
        self.server_url = args.server_url.rstrip("/")
        self.default_user_id = args.user_id

        if args.save:
            self.save_config()

        return args


# Global config instance
config = Config()
