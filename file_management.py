import json
import os
import pathlib

from dotenv import load_dotenv

from exceptions import ConfigError

PROJECT_ROOT = pathlib.Path(__file__).parent.absolute()
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "staging.json"
SAMPLES_DIR = PROJECT_ROOT / "samples"
DEFAULT_API_KEY_ENV = "GEMINI_API_KEY"

def load_config(config_path=None):
    """Load the JSON config. MATCHER_CONFIG overrides the default path."""
    path = pathlib.Path(config_path or os.getenv("MATCHER_CONFIG") or DEFAULT_CONFIG_PATH)
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    config.setdefault("gemini", {})
    config.setdefault("logging", {})
    return config

def api_key_env_name(config):
    return config.get("gemini", {}).get("api_key_env") or DEFAULT_API_KEY_ENV

def resolve_api_key(config):
    """Read the credential from the environment (a .env file is honoured too).

    Returns None when the variable is unset or blank.
    """
    load_dotenv()
    api_key = os.getenv(api_key_env_name(config), "").strip()
    return api_key or None

def extract_text_from_file(file_path):
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()

def load_sample_data(samples_dir=None):
    """Returns the fixed (resume, job_description) example pair."""
    samples_dir = pathlib.Path(samples_dir or SAMPLES_DIR)
    resume_text = extract_text_from_file(samples_dir / "sample_resume.txt")
    job_description = extract_text_from_file(samples_dir / "sample_job_description.txt")
    return resume_text, job_description
