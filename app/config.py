"""Configuration management."""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from tools.bridge_client import DEFAULT_SECRET_HEADER
from tools.llm_client import DEFAULT_ANTHROPIC_MODEL, DEFAULT_CHAT_COMPLETION_URL, DEFAULT_OPENAI_MODEL

# Load .env file if it exists
env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

CONFIG_FILE = Path(__file__).parent.parent / 'config' / 'config.yaml'


def load_config() -> Dict[str, Any]:
    """Load configuration from YAML file and environment variables."""
    # Load from YAML
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, 'r') as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"{CONFIG_FILE} must contain a mapping, not {type(config).__name__}")
    else:
        config = {}

    # Override with environment variables
    provider = str(os.getenv('GENERATION_PROVIDER', config.get('generation_provider', 'openai'))).lower()
    default_model = DEFAULT_ANTHROPIC_MODEL if provider == 'anthropic' else DEFAULT_OPENAI_MODEL

    config['GENERATION_PROVIDER'] = provider
    config['OPENAI_API_KEY'] = os.getenv('OPENAI_API_KEY', config.get('openai_api_key', ''))
    config['ANTHROPIC_API_KEY'] = os.getenv('ANTHROPIC_API_KEY', config.get('anthropic_api_key', ''))
    config['GENERATION_URL'] = os.getenv('GENERATION_URL', config.get('generation_url', DEFAULT_CHAT_COMPLETION_URL))
    config['GENERATION_MODEL'] = os.getenv('GENERATION_MODEL', config.get('generation_model', default_model))
    config['GENERATION_TEMPERATURE'] = float(os.getenv('GENERATION_TEMPERATURE', config.get('generation_temperature', 0.7)))
    config['GENERATION_MAX_TOKENS'] = int(os.getenv('GENERATION_MAX_TOKENS', config.get('generation_max_tokens', 4096)))
    config['GENERATION_TIMEOUT'] = float(os.getenv('GENERATION_TIMEOUT', config.get('generation_timeout', 120)))
    config['BRIDGE_URL'] = os.getenv('GIBLINK_BRIDGE_URL', config.get('bridge_url', ''))
    config['BRIDGE_SECRET_KEY'] = os.getenv('GIBLINK_BRIDGE_SECRET_KEY', config.get('bridge_secret_key', ''))
    config['BRIDGE_SECRET_HEADER'] = os.getenv('BRIDGE_SECRET_HEADER', config.get('bridge_secret_header', DEFAULT_SECRET_HEADER))
    config['BRIDGE_TIMEOUT'] = float(os.getenv('BRIDGE_TIMEOUT', config.get('bridge_timeout', 30)))
    config['CORS_ORIGINS'] = os.getenv('CORS_ORIGINS', config.get('cors_origins', '*'))
    config['HOST'] = os.getenv('HOST', config.get('host', '0.0.0.0'))
    config['PORT'] = int(os.getenv('PORT', config.get('port', 8000)))
    config['DEBUG'] = os.getenv('DEBUG', 'false').lower() == 'true' or config.get('debug', False)

    return config

