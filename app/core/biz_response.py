from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class BizResponse(JSONResponse):
    """
    统一业务响应体：
        {"code": <HTTP 状态码>, "msg": <提示信息>, "data": <业务数据>}
    - HTTP 状态码与 code 保持一致，方便网关 / 前端两边判断
    """

    def __init__(self, data: Any = None, msg: str = "success", status_code: int = 200, headers: dict | None = None):
        content = {
            "code": status_code,
            "msg": msg,
            "data": jsonable_encoder(data),
        }
        super().__init__(content=content, status_code=status_code, headers=headers)
