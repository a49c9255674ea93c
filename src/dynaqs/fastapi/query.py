from typing import Any, Dict, Mapping, Optional

from fastapi import Request

from dynaqs.error import BadRequestError
from dynaqs.helper.qsutil import group_query_items
from dynaqs.query import QueryStringParser

from . import config, logger

GROUP_REPEATED_KEYS = config.GROUP_REPEATED_KEYS
MAX_QUERY_PARAMS = config.MAX_QUERY_PARAMS


def collect_query_params(params, group_repeated: bool = GROUP_REPEATED_KEYS, limit: int = MAX_QUERY_PARAMS):
    ''' Convert starlette QueryParams (or any mapping) into the parser input. '''
    if hasattr(params, 'multi_items'):
        items = params.multi_items()
    else:
        items = list(params.items())

    if limit and len(items) > limit:
        raise BadRequestError('Q01.401', f'Too many query parameters: {len(items)} > {limit}')

    return group_query_items(items, group_repeated)


class QueryFilter(object):
    '''
    FastAPI dependency yielding the filter of the request query string.

        order_filter = QueryFilter(whitelist=['status', 'total'], custom={'after': 'created'})

        @app.get('/orders')
        async def list_orders(where: dict = Depends(order_filter)):
            ...
    '''

    def __init__(self, parser: Optional[QueryStringParser] = None, exclude=(), **options):
        self.parser = parser or QueryStringParser(**options)
        self.exclude = frozenset(exclude)

    def __call__(self, request: Request) -> Dict[str, Any]:
        query = collect_query_params(request.query_params)
        return self.parse(query)

    def parse(self, query: Mapping[str, Any]) -> Dict[str, Any]:
        if self.exclude:
            query = {k: v for k, v in query.items() if k not in self.exclude}

        result = self.parser.parse(query)
        logger.debug('Query filter %s => %s', query, result)
        return result
