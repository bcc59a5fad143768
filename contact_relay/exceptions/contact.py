from fastapi import status

from .api_exception import APIException


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "メール送信に失敗しました。時間をおいて再度お試しください。"
    description = "The message could not be handed to the mail relay."
