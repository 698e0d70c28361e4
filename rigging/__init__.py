from .clients import ClientSet as ClientSet
from .env import Env as Env
from .env import load_env as load_env
from .orchestrator import Orchestrator as Orchestrator
from .registry import ClientRegistry as ClientRegistry
from .tenancy import Tenancy as Tenancy
from .tenancy import TenancyKey as TenancyKey
