from .init_future import AsyncInitFuture as AsyncInitFuture
from .init_result import InitResult as InitResult
from .polling import poll_until as poll_until
from .scheduler_bootstrap import SchedulerBootstrap as SchedulerBootstrap
from .scheduler_bootstrap import compile_task_states as compile_task_states
