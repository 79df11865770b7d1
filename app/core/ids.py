from app.core.exceptions import InvalidID

# 与数据库无符号 32 位主键保持一致
MAX_ID = 2**32 - 1


def parse_id(raw: str, entity: str) -> int:
    """
    把路径参数解析为正整数 ID：
    - 只接受十进制数字（不接受符号、空格、小数）
    - 0 和超出 32 位无符号范围的值都视为非法
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidID(entity, raw)
    value = int(raw)
    if value <= 0 or value > MAX_ID:
        raise InvalidID(entity, raw)
    return value
