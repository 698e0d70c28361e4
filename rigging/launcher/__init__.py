from .catalog_handle import CatalogHandle as CatalogHandle
from .ports import allocate_ports as allocate_ports
from .scheduler_service_handle import SchedulerServiceHandle as SchedulerServiceHandle
from .secrets_service_handle import SecretsServiceHandle as SecretsServiceHandle
from .service_launcher import ServiceLauncher as ServiceLauncher
