"""
SQL parse REST API endpoints.
"""

import logging

from fastapi import APIRouter, HTTPException

from sql_tree_server.exceptions import InvalidSQLError, TreeRenderError
from sql_tree_server.models.parse import ParseRequest, ParseResponse
from sql_tree_server.services.parse_service import get_parse_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/parse", tags=["parse"])


@router.post("", response_model=ParseResponse)
async def parse_sql(request: ParseRequest) -> ParseResponse:
    """
    Parse SQL strictly.

    Args:
        request: SQL text to parse

    Returns:
        Rendered syntax tree

    Raises:
        HTTPException: 400 if the SQL contains syntax errors, 500 on render failure
    """
    try:
        tree = get_parse_service().parse_sql(request.sql)
        return ParseResponse(tree=tree)

    except InvalidSQLError as e:
        logger.info(f"Strict parse rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except TreeRenderError as e:
        logger.error(f"Error rendering parse tree: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/recover", response_model=ParseResponse)
async def parse_sql_with_error_recovery(request: ParseRequest) -> ParseResponse:
    """
    Parse SQL with error recovery; ERROR nodes appear in the tree.

    Args:
        request: SQL text to parse

    Returns:
        Rendered syntax tree

    Raises:
        HTTPException: 400 if the text is not valid UTF-8, 500 on render failure
    """
    try:
        tree = get_parse_service().parse_sql_with_error_recovery(request.sql)
        return ParseResponse(tree=tree)

    except InvalidSQLError as e:
        logger.info(f"Tolerant parse rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except TreeRenderError as e:
        logger.error(f"Error rendering parse tree: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")
