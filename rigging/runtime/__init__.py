from .clock import Clock as Clock
from .clock import Deadline as Deadline
from .process_handle import ProcessHandle as ProcessHandle
from .process_spawner import ProcessSpawner as ProcessSpawner
