"""Example usage of the async container registry client."""

import asyncio
import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from vultr_registry_client import (
    ContainerRegistryService,
    DockerCredentialsOptions,
    ListOptions,
    RegistryConfig,
    RegistryError,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Walk all registries page by page and show their repositories."""
    config = RegistryConfig.from_env()

    try:
        async with ContainerRegistryService(config) as vcr:
            plans = await vcr.list_plans()
            logger.info(f"Start-up plan: {plans.start_up.max_storage_mb} MB")

            options = ListOptions(per_page=10)
            while True:
                registries, meta = await vcr.list(options)
                for registry in registries:
                    logger.info(f"Registry {registry.name} ({registry.urn})")
                    repos, _ = await vcr.list_repositories(registry.id)
                    for repo in repos:
                        logger.info(f"  {repo.image}: {repo.pull_count} pulls")

                if meta.links.next is None:
                    break
                options = ListOptions(cursor=meta.links.next, per_page=10)

    except RegistryError as e:
        logger.error(f"Registry error: {e}")


async def issue_credentials(registry_id: str):
    """Issue read-only Docker credentials valid for one hour."""
    config = RegistryConfig.from_env()

    async with ContainerRegistryService(config) as vcr:
        creds = await vcr.create_docker_credentials(
            registry_id, DockerCredentialsOptions(expiry_seconds=3600, write_access=False)
        )
        path = await creds.save("./docker-config/config.json")
        logger.info(f"Wrote {len(creds)} bytes to {path}")


if __name__ == "__main__":
    print("=== Registries ===")
    asyncio.run(main())

    if len(sys.argv) > 1:
        print("\n=== Docker credentials ===")
        asyncio.run(issue_credentials(sys.argv[1]))
