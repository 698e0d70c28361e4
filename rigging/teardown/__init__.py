from .teardown_coordinator import TeardownCoordinator as TeardownCoordinator
