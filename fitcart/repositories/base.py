from typing import Any, Dict

from botocore.exceptions import ClientError

from fitcart.repositories.errors import RepoError
from fitcart.utils.log import logger


class DynamoRepository:
    """
    Base class for DynamoDB repositories with common error handling.
    """

    def __init__(self, table=None):
        from fitcart.utils import db

        self._table = table or db.get_table()

    def _safe_put(self, item: dict) -> None:
        """Safely put item"""
        try:
            self._table.put_item(Item=item)
        except ClientError as e:
            logger.exception("DynamoDB put_item failed")
            raise RepoError("Failed to write to database") from e

    def _safe_update(self, **kwargs) -> Dict[str, Any]:
        try:
            resp = self._table.update_item(**kwargs)
            return resp
        except ClientError as e:
            logger.exception("DynamoDB update_item failed")
            raise RepoError("Failed to update database") from e

    def _safe_get(self, **kwargs) -> dict | None:
        try:
            resp = self._table.get_item(**kwargs)
            return resp.get("Item")
        except ClientError as e:
            logger.exception("DynamoDB get_item failed")
            raise RepoError("Failed to read from database") from e
