from .scheduler_fixture import SchedulerFixture as SchedulerFixture
from .secrets_fixture import SecretsFixture as SecretsFixture
