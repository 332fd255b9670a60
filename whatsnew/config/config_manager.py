from typing import Dict, Optional
import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Info dictionary keys of the host application
SHORT_VERSION_KEY = 'CFBundleShortVersionString'
BUILD_NUMBER_KEY = 'CFBundleVersion'

# Environment variables backing the info dictionary
ENV_TO_INFO_KEY = {
    'WHATSNEW_SHORT_VERSION': SHORT_VERSION_KEY,
    'WHATSNEW_BUILD_NUMBER': BUILD_NUMBER_KEY,
}
LAST_SEEN_VERSION_VAR = 'WHATSNEW_LAST_SEEN_VERSION'

class ConfigManager:
    _instance: Optional['ConfigManager'] = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
            
        self._initialized = True
        self.system_config = '/etc/whatsnew/config'
        self.local_config = '.env'
        self.config_loaded = False
        self._config: Dict[str, Optional[str]] = {}
        
    def load_configuration(self, path: Optional[str] = None) -> bool:
        """
        Load configuration from the local and system config files.
        Later sources win: process environment, then .env, then the system config.
        
        Args:
            path: Explicit config file to load instead of the default locations
            
        Returns:
            True if at least one config file was read
        """
        self.config_loaded = False
        
        if path is not None:
            if os.path.exists(path):
                load_dotenv(path, override=True)
                self.config_loaded = True
            else:
                logger.error(f"Config file not found: {path}")
        else:
            # .env first (local development), then the system config overrides it
            if os.path.exists(self.local_config):
                load_dotenv(self.local_config, override=True)
                self.config_loaded = True
            
            if os.path.exists(self.system_config):
                load_dotenv(self.system_config, override=True)
                self.config_loaded = True
            
            if not self.config_loaded:
                logger.warning(
                    f"No configuration file found at {self.system_config} or {self.local_config}, "
                    "using process environment only"
                )
        
        # Cache the environment either way so metadata falls back to it
        self._cache_config()
        return self.config_loaded
    
    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next call builds a fresh one"""
        cls._instance = None
    
    def _cache_config(self):
        """Cache all relevant environment variables"""
        for var in list(ENV_TO_INFO_KEY) + [LAST_SEEN_VERSION_VAR]:
            self._config[var] = os.getenv(var)
    
    def _get(self, var: str) -> Optional[str]:
        if var not in self._config:
            # Not loaded yet; read straight from the environment
            return os.getenv(var)
        return self._config[var]
    
    @property
    def short_version(self) -> Optional[str]:
        """Get the application's short version string"""
        return self._get('WHATSNEW_SHORT_VERSION')
    
    @property
    def build_number(self) -> Optional[str]:
        """Get the application's build number"""
        return self._get('WHATSNEW_BUILD_NUMBER')
    
    @property
    def last_seen_version(self) -> Optional[str]:
        """Get the version whose release notes were last presented"""
        return self._get(LAST_SEEN_VERSION_VAR)
    
    @property
    def info_dictionary(self) -> Dict[str, str]:
        """Get the host info dictionary, containing only the keys that are set"""
        info = {}
        for var, key in ENV_TO_INFO_KEY.items():
            value = self._get(var)
            if value is not None:
                info[key] = value
        return info
    