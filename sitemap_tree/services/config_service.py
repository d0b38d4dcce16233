from pathlib import Path
import yaml
import os
from typing import Dict, Optional
from dotenv import load_dotenv
from sitemap_tree.models.config_models import SitemapSource, SitemapSourcesConfig
from sitemap_tree.models.crawl_models import CrawlConfig

class ConfigService:
    """Service for loading crawl defaults from the environment and sitemap sources from YAML"""

    def __init__(self, sources_path: Optional[Path] = None):
        self._sources_config: Optional[SitemapSourcesConfig] = None
        self._sources_path = sources_path
        self._env_loaded = False
        self._load_environment()

    def _load_environment(self):
        """Load environment variables from .env file"""
        if not self._env_loaded:
            env_path = Path(__file__).parent.parent.parent / ".env"

            if env_path.exists():
                load_dotenv(env_path)
            else:
                load_dotenv()

            self._env_loaded = True

    def env_var(self, key: str, default: Optional[str] = None, required: bool = False) -> str:
        """Get environment variable with validation"""
        value = os.getenv(key, default)

        if required and not value:
            raise ValueError(f"Required environment variable '{key}' is not set")

        return value

    @property
    def log_level(self) -> str:
        """Log level from environment"""
        return self.env_var("LOG_LEVEL", default="INFO")

    @property
    def sitemap_timeout_ms(self) -> int:
        """Per-request timeout in milliseconds"""
        return int(self.env_var("SITEMAP_TIMEOUT_MS", default="15000"))

    @property
    def sitemap_concurrency(self) -> int:
        """Maximum sitemap fetches in flight at once"""
        return int(self.env_var("SITEMAP_CONCURRENCY", default="10"))

    @property
    def sitemap_retries(self) -> int:
        """Retry attempts per failed sitemap"""
        return int(self.env_var("SITEMAP_RETRIES", default="0"))

    @property
    def sitemap_lastmod(self) -> int:
        """Minimum lastmod as epoch milliseconds (0 disables filtering)"""
        return int(self.env_var("SITEMAP_LASTMOD", default="0"))

    @property
    def sitemap_reject_unauthorized(self) -> bool:
        """Whether to verify TLS certificates"""
        return self.env_var("SITEMAP_REJECT_UNAUTHORIZED", default="True").lower() == "true"

    @property
    def sitemap_debug(self) -> bool:
        """Whether crawls emit diagnostic logging"""
        return self.env_var("SITEMAP_DEBUG", default="False").lower() == "true"

    @property
    def sitemap_user_agent(self) -> Optional[str]:
        """User-Agent header sent with every sitemap request, if set"""
        return self.env_var("SITEMAP_USER_AGENT")

    @property
    def sources_path(self) -> Path:
        """Location of sitemaps.yaml"""
        if self._sources_path is not None:
            return Path(self._sources_path)

        override = self.env_var("SITEMAP_SOURCES_PATH")
        if override:
            return Path(override)

        return Path(__file__).parent.parent.parent / "config" / "sitemaps.yaml"

    def default_crawl_config(self, **overrides) -> CrawlConfig:
        """Crawl config built from environment defaults plus explicit overrides"""
        headers = {}
        if self.sitemap_user_agent:
            headers["User-Agent"] = self.sitemap_user_agent

        settings = {
            "timeout": self.sitemap_timeout_ms,
            "concurrency": self.sitemap_concurrency,
            "retries": self.sitemap_retries,
            "lastmod": self.sitemap_lastmod,
            "reject_unauthorized": self.sitemap_reject_unauthorized,
            "debug": self.sitemap_debug,
            "request_headers": headers,
        }
        settings.update({key: value for key, value in overrides.items() if value is not None})

        return CrawlConfig(**settings)

    def load_sources_config(self) -> SitemapSourcesConfig:
        """Loads the sitemap sources configuration from sitemaps.yaml"""
        if self._sources_config is not None:
            return self._sources_config

        config_path = self.sources_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "r", encoding="utf-8") as file:
            try:
                raw_config = yaml.safe_load(file)

                if not isinstance(raw_config, dict):
                    raise ValueError("Invalid configuration format")

                self._sources_config = SitemapSourcesConfig(**raw_config)

                return self._sources_config

            except yaml.YAMLError as e:
                raise ValueError(f"Error parsing configuration: {e}")

    @property
    def all_sources(self) -> Dict[str, SitemapSource]:
        """Get all sitemap sources from configuration"""
        config = self.load_sources_config()

        return config.sources

    def source(self, source_id: str) -> Optional[SitemapSource]:
        """Get a specific sitemap source by ID"""
        return self.all_sources.get(source_id)

    def crawl_config_for(self, source_id: str) -> CrawlConfig:
        """Merge environment defaults with a source's overrides"""
        source = self.source(source_id)
        if not source:
            raise ValueError(f"Sitemap source {source_id} not found in configuration")

        config = self.default_crawl_config(
            url=source.url,
            timeout=source.timeout,
            lastmod=source.lastmod,
            concurrency=source.concurrency,
            retries=source.retries,
            reject_unauthorized=source.reject_unauthorized,
            debug=source.debug,
        )

        if source.request_headers:
            config = CrawlConfig(**{
                **config.model_dump(),
                "request_headers": {**config.request_headers, **source.request_headers},
            })

        return config

    def reload(self) -> None:
        """Drop the cached sources so the next access rereads sitemaps.yaml"""
        self._sources_config = None


# Global instance
config_service = ConfigService()
