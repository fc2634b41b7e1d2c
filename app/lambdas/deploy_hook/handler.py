# app/lambdas/deploy_hook/handler.py
import json
import logging
import os

from notesdb.clients import codedeploy_client
from notesdb.events import DeploymentHook

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

codedeploy = codedeploy_client()


def lambda_handler(event, context):
    """
    CodeDeploy pre/post traffic hook. Always reports Succeeded.

    Errors are left to propagate so Lambda records a failed invocation
    and CodeDeploy rolls the deployment back.
    """
    logger.info("event: %s", json.dumps(event))

    hook = DeploymentHook.from_event(event)
    logger.info(
        "found DeploymentId=%r and ExecutionId=%r",
        hook.deployment_id,
        hook.lifecycle_event_hook_execution_id,
    )
    logger.info("automatically succeeding")

    codedeploy.put_lifecycle_event_hook_execution_status(
        deploymentId=hook.deployment_id,
        lifecycleEventHookExecutionId=hook.lifecycle_event_hook_execution_id,
        status="Succeeded",
    )
