"""Centralized configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Defines application settings, loaded from environment variables or .env file.

    Attributes
    ----------
    system_info_patterns : list of str
        Lower-case substrings identifying system information files by name.
    password_file_names : list of str
        Lower-case substrings identifying browser password dumps by name.
    max_username_length : int
        Usernames longer than this are truncated before being stored.
    max_workers : int
        Threads used to parse a batch. 1 parses on the calling thread.
    binary_printable_ratio : float
        Share of printable characters under which content is binary.
    date_min_year : int
        Earliest year accepted from the generic date parse.
    date_max_year : int
        Latest year accepted from the generic date parse.
    log_level : str
        Default logging level.
    """

    system_info_patterns: List[str] = [
        "system",
        "information",
        "userinfo",
        "user_info",
        "systeminfo",
        "system_info",
        "info",
    ]
    password_file_names: List[str] = [
        "all passwords.txt",
        "all_passwords.txt",
        "passwords.txt",
        "allpasswords_list.txt",
        "_allpasswords_list",
    ]
    max_username_length: int = 500
    max_workers: int = 1

    binary_printable_ratio: float = 0.8
    date_min_year: int = 2000
    date_max_year: int = 2100

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding='utf-8', extra='ignore')

# Create a single instance of settings to be used throughout the application
settings = Settings()
