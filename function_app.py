import azure.functions as func

from motiondirector.function_blueprints.http_generate_plan import bp as generate_plan_bp
from motiondirector.shared.config import AZURE_SDK_LOG_LEVEL, LOG_LEVEL
from motiondirector.shared.logging_utils import configure_logging

app = func.FunctionApp()

configure_logging(LOG_LEVEL, AZURE_SDK_LOG_LEVEL)
app.register_functions(generate_plan_bp)
