"""
CloudHealth resource families.
"""

from .aws_account_assignments import AwsAccountAssignments
from .aws_accounts import AwsAccounts
from .customer_statements import CustomerStatements
from .customers import Customers
from .organizations import Organizations
from .price_book_assignments import AccountPriceBookAssignments, CustomerPriceBookAssignments
from .reports import CostHistoryReports, CostHistoryRequestOptions

__all__ = [
    'AccountPriceBookAssignments',
    'AwsAccountAssignments',
    'AwsAccounts',
    'CostHistoryReports',
    'CostHistoryRequestOptions',
    'CustomerPriceBookAssignments',
    'CustomerStatements',
    'Customers',
    'Organizations',
]
