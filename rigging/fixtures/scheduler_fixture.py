from rigging.errors import FixtureOperationError, RiggingError
from rigging.logging import FixtureError, Logger
from rigging.models import SchedulerNamespace, VariableRecord
from rigging.registry import ClientRegistry


class SchedulerFixture:
    """Test-time helper for scheduler variables and namespaces."""

    def __init__(
        self,
        registry: ClientRegistry,
        logger: Logger | None = None,
    ) -> None:
        self._registry = registry
        self._logger = logger or Logger()

    async def create_variable(
        self,
        path: str,
        items: dict[str, str],
        namespace: str | None = None,
    ) -> None:
        try:
            await self._registry.default().scheduler.update_variable(
                VariableRecord(
                    path=path,
                    items=dict(items),
                    namespace=namespace,
                )
            )

        except RiggingError as err:
            raise await self._failed("create_variable", path, err) from err

    async def create_namespace(self, name: str) -> None:
        try:
            await self._registry.default().scheduler.register_namespace(
                SchedulerNamespace(name=name)
            )

        except RiggingError as err:
            raise await self._failed("create_namespace", name, err) from err

    async def delete_variable(
        self,
        path: str,
        namespace: str | None = None,
    ) -> None:
        try:
            await self._registry.default().scheduler.delete_variable(
                path,
                namespace=namespace,
            )

        except RiggingError as err:
            raise await self._failed("delete_variable", path, err) from err

    async def _failed(
        self,
        operation: str,
        path: str,
        err: Exception,
    ) -> FixtureOperationError:
        await self._logger.log(FixtureError(
            message=f"Scheduler fixture {operation} failed",
            fixture="scheduler",
            operation=operation,
            path=path,
            error=str(err),
        ))

        return FixtureOperationError("scheduler", operation, path, str(err))
