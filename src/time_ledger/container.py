from __future__ import annotations

from dataclasses import dataclass

from .employees.rest_employee_repository import RestEmployeeRepository
from .gateway.service import MutationGateway
from .projects.rest_project_repository import RestProjectRepository
from .store.connection import StoreConfig, StoreConnection
from .timelogs.rest_timelog_repository import RestTimeLogRepository


@dataclass(frozen=True)
class Container:
    conn: StoreConnection

    time_logs_repo: RestTimeLogRepository
    employees_repo: RestEmployeeRepository
    projects_repo: RestProjectRepository

    mutation_gateway: MutationGateway


def build_container(*, store_config: dict, conn: StoreConnection | None = None) -> Container:
    if conn is None:
        config = StoreConfig(
            url=str(store_config["url"]),
            api_key=str(store_config["api_key"]),
            schema=str(store_config.get("schema", "public")),
            timeout_seconds=float(store_config.get("timeout_seconds", 30.0)),
        )
        conn = StoreConnection.get_instance(config)

    time_logs_repo = RestTimeLogRepository(conn)
    employees_repo = RestEmployeeRepository(conn)
    projects_repo = RestProjectRepository(conn)

    mutation_gateway = MutationGateway(time_logs_repo, employees_repo, projects_repo)

    return Container(
        conn=conn,
        time_logs_repo=time_logs_repo,
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        mutation_gateway=mutation_gateway,
    )
