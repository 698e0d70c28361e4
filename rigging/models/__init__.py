from .catalog_agent_config import CatalogAgentConfig as CatalogAgentConfig
from .catalog_agent_config import CatalogAgentPorts as CatalogAgentPorts
from .catalog_models import (
    AgentService as AgentService,
    AgentServiceConnect as AgentServiceConnect,
    CatalogAgentDetails as CatalogAgentDetails,
    CatalogAgentSelf as CatalogAgentSelf,
    CatalogRegistration as CatalogRegistration,
    ConnectProxyConfig as ConnectProxyConfig,
    NamespaceRecord as NamespaceRecord,
    PartitionRecord as PartitionRecord,
    PeeringToken as PeeringToken,
    PeeringTokenRequest as PeeringTokenRequest,
    ServiceAddress as ServiceAddress,
)
from .scheduler_models import (
    AllocationStub as AllocationStub,
    CanaryJob as CanaryJob,
    SchedulerAgentSelf as SchedulerAgentSelf,
    SchedulerMember as SchedulerMember,
    SchedulerNamespace as SchedulerNamespace,
    TaskEvent as TaskEvent,
    TaskState as TaskState,
    VariableRecord as VariableRecord,
)
from .secrets_models import MountInput as MountInput
from .secrets_models import SecretData as SecretData
from .secrets_models import SecretsHealth as SecretsHealth
