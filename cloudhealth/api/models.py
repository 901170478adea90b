from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

# Anything the pipeline knows how to encode as a request body
JSONSerializable = Union[BaseModel, Dict[str, Any], List[Any]]


class AwsAccountStatus(BaseModel):
    level: Optional[str] = None
    last_update: Optional[datetime] = None


class AwsAccountAuthentication(BaseModel):
    protocol: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    assume_role_arn: Optional[str] = None
    assume_role_external_id: Optional[str] = None


class AwsAccount(BaseModel):
    id: Optional[int] = None
    name: str
    owner_id: Optional[str] = None
    hide_public_fields: Optional[bool] = None
    region: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    account_type: Optional[str] = None
    vpc_only: Optional[bool] = None
    cluster_name: Optional[str] = None
    status: Optional[AwsAccountStatus] = None
    authentication: Optional[AwsAccountAuthentication] = None
    tags: Optional[List[Dict[str, str]]] = None


class AwsAccountsPage(BaseModel):
    aws_accounts: List[AwsAccount]


class AwsExternalId(BaseModel):
    generated_external_id: str


class CustomerAddress(BaseModel):
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None


class CustomerPartnerBillingConfiguration(BaseModel):
    enabled: bool = False
    folder: Optional[str] = None


class CustomerBillingConfiguration(BaseModel):
    status: Optional[str] = None


class Customer(BaseModel):
    id: Optional[int] = None
    name: str
    classification: Optional[str] = None
    margin_percentage: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    generated_external_id: Optional[str] = None
    partner_billing_configuration: Optional[CustomerPartnerBillingConfiguration] = None
    address: Optional[CustomerAddress] = None
    billing_configuration: Optional[CustomerBillingConfiguration] = None
    tags: Optional[List[Dict[str, str]]] = None


class CustomersPage(BaseModel):
    customers: List[Customer]


class Currency(BaseModel):
    name: Optional[str] = None
    symbol: Optional[str] = None


class BillingArtifact(BaseModel):
    """A customer statement for one billing period and cloud."""

    customer_id: int
    cloud: Optional[str] = None
    billing_period: Optional[str] = None
    total_amount: Optional[float] = None
    status: Optional[str] = None
    detailed_billing_records_generation_time: Optional[str] = None
    statement_generation_time: Optional[str] = None
    statement_summary_generation_time: Optional[str] = None
    currency: Optional[Currency] = None
    invoice_id: Optional[str] = None
    invoice_date: Optional[str] = None


class BillingArtifactsPage(BaseModel):
    billing_artifacts: List[BillingArtifact]


class AwsAccountAssignment(BaseModel):
    id: Optional[int] = None
    owner_id: str
    customer_id: int
    payer_account_owner_id: Optional[str] = None


class AwsAccountAssignmentsPage(BaseModel):
    aws_account_assignments: List[AwsAccountAssignment]


class AccountPriceBookAssignment(BaseModel):
    id: int
    target_client_api_id: int
    price_book_assignment_id: int
    # a single owner id or a list of them, depending on the assignment
    billing_account_owner_id: Optional[Any] = None


class AccountPriceBookAssignmentsPage(BaseModel):
    price_book_account_assignments: List[AccountPriceBookAssignment]


class CustomerPriceBookAssignment(BaseModel):
    id: int
    price_book_id: int
    target_client_api_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CustomerPriceBookAssignmentsPage(BaseModel):
    price_book_assignments: List[CustomerPriceBookAssignment]


class Organization(BaseModel):
    id: str
    parent_organization_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    idp_name: Optional[str] = None
    flex_org: bool = False
    default_organization: bool = False
    assigned_users_count: int = 0
    num_aws_accounts: int = 0
    num_azure_subscriptions: int = 0
    num_gcp_compute_projects: int = 0
    num_data_center_accounts: int = 0
    num_vmware_csp_organizations: int = 0


class OrganizationsPage(BaseModel):
    organizations: List[Organization]


class ReportDimensionMember(BaseModel):
    name: str
    label: str
    direct: Optional[bool] = None
    extended: Optional[bool] = None
    parent: Optional[int] = None
    excluded: Optional[Any] = None
    populated: Optional[Any] = None
    sort_order: Optional[Any] = None


class ReportMeasureMetadata(BaseModel):
    ancillary_caches: Optional[List[str]] = None
    label: Optional[str] = None
    supports_drilldown: Optional[bool] = None
    type: Optional[str] = None
    units: Optional[str] = None


class ReportMeasure(BaseModel):
    name: str
    label: str
    metadata: Optional[ReportMeasureMetadata] = None


class CostHistoryReport(BaseModel):
    """AWS cost history broken down by AWS-Service-Category.

    ``data[i][j]`` is the value of measure ``j`` for the ``i``-th member of
    the first dimension.
    """

    report: Optional[str] = None
    cube_id: Optional[str] = None
    status: Optional[str] = None
    interval: Optional[str] = None
    updated_at: Optional[datetime] = None
    data: List[List[Optional[float]]]
    dimensions: List[Dict[str, List[ReportDimensionMember]]]
    measures: List[ReportMeasure]
    filters: Optional[List[str]] = None
    bill_drop_info: Optional[List[Any]] = None
    enable_dp_popover: Optional[bool] = None
    visualization_options: Optional[Any] = None
