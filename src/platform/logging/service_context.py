"""
Service context for log lines.

Identifies which service instance produced a log line so that output from
several API replicas can be told apart once aggregated.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticketing-api')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a unique hostname; on a laptop the PID is more useful
    instance = os.getenv('HOSTNAME') or socket.gethostname()
    if deploy_env == 'local_dev':
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance[:12]}'
