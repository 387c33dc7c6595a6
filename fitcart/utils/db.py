import boto3

from fitcart.settings import settings

REGION_NAME = settings.REGION
TABLE_NAME = settings.DDB_TABLE_NAME


def get_dynamo_resource():
    return boto3.resource("dynamodb", region_name=REGION_NAME)


def get_table():
    resource = get_dynamo_resource()
    return resource.Table(TABLE_NAME)  # type: ignore


def build_owner_pk(owner: str) -> str:
    """
    Partition key for everything stored for one device/user.
    Example: OWNER#local
    """
    return f"OWNER#{owner}"


def build_settings_sk() -> str:
    return "SETTINGS"
