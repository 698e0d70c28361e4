import msgspec

from .backend_case import pascal_case


class CanaryJob(msgspec.Struct, rename=pascal_case, kw_only=True):
    """
    The canary job's ID. The full document is submitted to the
    scheduler unchanged.
    """

    id: str | None = None


class TaskEvent(msgspec.Struct, rename=pascal_case, kw_only=True):
    type: str
    display_message: str = ""
    time: int = 0


class TaskState(msgspec.Struct, rename=pascal_case, kw_only=True):
    state: str = ""
    failed: bool = False
    events: list[TaskEvent] | None = None


class AllocationStub(msgspec.Struct, rename=pascal_case, kw_only=True):
    id: str
    job_id: str = ""
    client_status: str = ""
    desired_status: str = ""
    task_states: dict[str, TaskState] | None = None


class SchedulerMember(msgspec.Struct, rename=pascal_case, kw_only=True):
    name: str = ""
    tags: dict[str, str] | None = None


class SchedulerAgentSelf(msgspec.Struct, kw_only=True):
    member: SchedulerMember = msgspec.field(
        default_factory=SchedulerMember,
    )

    @property
    def build(self) -> str:
        return (self.member.tags or {}).get("build", "")


class VariableRecord(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    path: str
    items: dict[str, str] = msgspec.field(default_factory=dict)
    namespace: str | None = None


class SchedulerNamespace(
    msgspec.Struct,
    rename=pascal_case,
    kw_only=True,
    omit_defaults=True,
):
    name: str
    description: str | None = None
