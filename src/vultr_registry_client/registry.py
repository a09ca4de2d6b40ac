"""Async functional registry operations."""

from typing import Optional

from .core.pagination import ListOptions, Meta
from .core.types import DEFAULT_API_URL, RegistryConfig
from .models import (
    ContainerRegistry,
    ContainerRegistryPlans,
    ContainerRegistryRegion,
    ContainerRegistryRepo,
    CreateRegistryRequest,
    DockerCredentials,
    DockerCredentialsOptions,
    UpdateRegistryRequest,
    UpdateRepositoryRequest,
)
from .service import ContainerRegistryService


def _service(api_key: str, api_url: str, timeout: int) -> ContainerRegistryService:
    return ContainerRegistryService(
        RegistryConfig(url=api_url, api_key=api_key, timeout=timeout)
    )


async def list_registries(
    api_key: str,
    cursor: Optional[str] = None,
    per_page: Optional[int] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> tuple[list[ContainerRegistry], Meta]:
    """레지스트리 목록의 한 페이지를 조회합니다.

    Args:
        api_key: API 키
        cursor: 이전 응답의 meta.links.next 값 (첫 페이지는 None)
        per_page: 페이지당 항목 수
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        tuple[list[ContainerRegistry], Meta]: 레지스트리 목록과 페이지 정보

    Raises:
        RegistryError: 요청 실패 시

    Examples:
        # 모든 페이지 순회
        cursor = None
        while True:
            registries, meta = await list_registries(key, cursor=cursor)
            ...
            cursor = meta.links.next
            if cursor is None:
                break
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.list(ListOptions(cursor=cursor, per_page=per_page))


async def get_registry(
    api_key: str, registry_id: str, api_url: str = DEFAULT_API_URL, timeout: int = 10
) -> ContainerRegistry:
    """레지스트리를 ID로 조회합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistry: 레지스트리 정보

    Raises:
        NotFoundError: 레지스트리가 없는 경우
        RegistryError: 요청 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.get(registry_id)


async def create_registry(
    api_key: str,
    name: str,
    region: str,
    plan: str,
    public: bool = False,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> ContainerRegistry:
    """새 레지스트리를 생성합니다.

    Args:
        api_key: API 키
        name: 레지스트리 이름 (예: "myregistry")
        region: 리전 이름 (예: "sjc")
        plan: 플랜 이름 (예: "start_up")
        public: 공개 레지스트리 여부 (기본값: False)
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistry: 생성된 레지스트리 (서버가 부여한 ID, 생성일 포함)

    Raises:
        RegistryError: 생성 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.create(
            CreateRegistryRequest(name=name, region=region, plan=plan, public=public)
        )


async def update_registry(
    api_key: str,
    registry_id: str,
    public: Optional[bool] = None,
    plan: Optional[str] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> ContainerRegistry:
    """레지스트리 설정을 변경합니다. None인 값은 전송되지 않습니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        public: 공개 여부 (선택사항)
        plan: 플랜 이름 (선택사항)
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistry: 변경된 레지스트리

    Raises:
        RegistryError: 변경 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.update(
            registry_id, UpdateRegistryRequest(public=public, plan=plan)
        )


async def delete_registry(
    api_key: str, registry_id: str, api_url: str = DEFAULT_API_URL, timeout: int = 10
) -> None:
    """레지스트리를 삭제합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Raises:
        RegistryError: 삭제 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        await vcr.delete(registry_id)


async def list_repositories(
    api_key: str,
    registry_id: str,
    cursor: Optional[str] = None,
    per_page: Optional[int] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> tuple[list[ContainerRegistryRepo], Meta]:
    """레지스트리의 저장소 목록 한 페이지를 조회합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        cursor: 이전 응답의 meta.links.next 값 (첫 페이지는 None)
        per_page: 페이지당 항목 수
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        tuple[list[ContainerRegistryRepo], Meta]: 저장소 목록과 페이지 정보

    Raises:
        RegistryError: 요청 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.list_repositories(
            registry_id, ListOptions(cursor=cursor, per_page=per_page)
        )


async def get_repository(
    api_key: str,
    registry_id: str,
    image_name: str,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> ContainerRegistryRepo:
    """저장소를 조회합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        image_name: 이미지 이름 (예: "nginx", "mycompany/myapp")
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistryRepo: 저장소 정보

    Raises:
        NotFoundError: 저장소가 없는 경우
        RegistryError: 요청 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.get_repository(registry_id, image_name)


async def update_repository(
    api_key: str,
    registry_id: str,
    image_name: str,
    description: Optional[str] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> ContainerRegistryRepo:
    """저장소 설명을 변경합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        image_name: 이미지 이름
        description: 새 설명 (None이면 전송되지 않음)
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistryRepo: 변경된 저장소

    Raises:
        RegistryError: 변경 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.update_repository(
            registry_id, image_name, UpdateRepositoryRequest(description=description)
        )


async def delete_repository(
    api_key: str,
    registry_id: str,
    image_name: str,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> None:
    """저장소를 삭제합니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        image_name: 이미지 이름
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Raises:
        RegistryError: 삭제 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        await vcr.delete_repository(registry_id, image_name)


async def create_docker_credentials(
    api_key: str,
    registry_id: str,
    expiry_seconds: Optional[int] = None,
    write_access: Optional[bool] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> DockerCredentials:
    """Docker CLI용 인증 정보를 새로 발급합니다.

    호출할 때마다 서버에서 새 인증 정보가 발급됩니다.

    Args:
        api_key: API 키
        registry_id: 레지스트리 ID
        expiry_seconds: 만료 시간 (초, 선택사항)
        write_access: 푸시 권한 부여 여부 (선택사항)
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        DockerCredentials: Docker config.json 원본 바이트

    Raises:
        RegistryError: 발급 실패 시

    Examples:
        creds = await create_docker_credentials(key, registry_id, write_access=True)
        await creds.save("~/.docker/config.json")
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.create_docker_credentials(
            registry_id,
            DockerCredentialsOptions(
                expiry_seconds=expiry_seconds, write_access=write_access
            ),
        )


async def list_regions(
    api_key: str,
    cursor: Optional[str] = None,
    per_page: Optional[int] = None,
    api_url: str = DEFAULT_API_URL,
    timeout: int = 10,
) -> tuple[list[ContainerRegistryRegion], Meta]:
    """레지스트리를 만들 수 있는 리전 목록을 조회합니다.

    Args:
        api_key: API 키
        cursor: 이전 응답의 meta.links.next 값 (첫 페이지는 None)
        per_page: 페이지당 항목 수
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        tuple[list[ContainerRegistryRegion], Meta]: 리전 목록과 페이지 정보

    Raises:
        RegistryError: 요청 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.list_regions(ListOptions(cursor=cursor, per_page=per_page))


async def list_plans(
    api_key: str, api_url: str = DEFAULT_API_URL, timeout: int = 10
) -> ContainerRegistryPlans:
    """레지스트리 플랜 목록을 조회합니다.

    Args:
        api_key: API 키
        api_url: API URL (기본값: "https://api.vultr.com")
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        ContainerRegistryPlans: start_up, business, premium, enterprise 플랜 정보

    Raises:
        RegistryError: 요청 실패 시
    """
    async with _service(api_key, api_url, timeout) as vcr:
        return await vcr.list_plans()
