from fastapi import status

from .api_exception import APIException


class TemplateLoadError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Template could not be loaded"
    description = "The template set could not be loaded or rendered."
