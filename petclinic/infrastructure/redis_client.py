"""Redis client factory following Dependency Inversion Principle."""
import logging
from typing import Optional
import redis
from redis.connection import ConnectionPool


class RedisClientFactory:
    """Factory for creating Redis clients with connection pooling."""

    _pool: Optional[ConnectionPool] = None
    _client: Optional[redis.Redis] = None

    @classmethod
    def create_pool(cls, url: str, max_connections: int = 20) -> ConnectionPool:
        """
        Create Redis connection pool.

        Args:
            url: Redis connection URL
            max_connections: Maximum number of connections in pool

        Returns:
            ConnectionPool instance
        """
        if cls._pool is None:
            logging.debug(f"Creating Redis connection pool: {cls._mask_url(url)}")
            cls._pool = ConnectionPool.from_url(
                url,
                max_connections=max_connections,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
            )
        return cls._pool

    @staticmethod
    def _mask_url(url: str) -> str:
        """Mask the password of a Redis URL for logging."""
        if '@' in url:
            auth_part, host_part = url.rsplit('@', 1)
            if ':' in auth_part.split('://', 1)[-1]:
                return f"{auth_part.rsplit(':', 1)[0]}:***@{host_part}"
        return url

    @classmethod
    def get_client(cls, url: Optional[str]) -> Optional[redis.Redis]:
        """
        Get Redis client instance (singleton pattern).

        Args:
            url: Redis connection URL

        Returns:
            Redis client instance or None if connection fails
        """
        if cls._client is None:
            if not url:
                logging.warning("REDIS_URL not configured")
                return None

            if not url.startswith(('redis://', 'rediss://', 'unix://')):
                logging.warning("Invalid Redis URL scheme. URL must start with redis://, rediss://, or unix://")
                return None

            try:
                client = redis.Redis(connection_pool=cls.create_pool(url))
                client.ping()
                cls._client = client
                logging.info("Redis connection established successfully")
            except redis.AuthenticationError as e:
                logging.error(f"Redis authentication failed: {e}")
                cls.close()
            except redis.ConnectionError as e:
                logging.warning(f"Failed to connect to Redis: {e}")
                cls.close()

        return cls._client

    @classmethod
    def close(cls) -> None:
        """Close Redis connections."""
        if cls._client:
            cls._client.close()
            cls._client = None
        if cls._pool:
            cls._pool.disconnect()
            cls._pool = None
