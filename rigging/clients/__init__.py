from .client_factory import ClientFactory as ClientFactory
from .client_set import ClientSet as ClientSet
from .http_catalog_client import HTTPCatalogClient as HTTPCatalogClient
from .http_scheduler_client import HTTPSchedulerClient as HTTPSchedulerClient
from .http_secrets_client import HTTPSecretsClient as HTTPSecretsClient
from .protocols import CatalogClient as CatalogClient
from .protocols import SchedulerClient as SchedulerClient
from .protocols import SecretsClient as SecretsClient
