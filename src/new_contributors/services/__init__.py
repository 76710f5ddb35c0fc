# services package
from new_contributors.services.new_contributors import NewContributorsService, parse_refetch_flag

__all__ = ['NewContributorsService', 'parse_refetch_flag']
