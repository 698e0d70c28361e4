from .tenancy import Tenancy as Tenancy
from .tenancy_helper import TenancyHelper as TenancyHelper
from .tenancy_key import TenancyKey as TenancyKey
