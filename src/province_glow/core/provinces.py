"""Seed catalog of the provincial-level divisions shown on the map.

Names follow the ``regionName`` spelling returned by the geolocation
service so a resolved region can be matched case-insensitively.
"""

from __future__ import annotations

from typing import Final, NamedTuple


class ProvinceSeed(NamedTuple):
    """Static description of a province used for provisioning."""

    name: str
    cn_name: str


PROVINCES: Final[tuple[ProvinceSeed, ...]] = (
    ProvinceSeed("Beijing", "北京"),
    ProvinceSeed("Tianjin", "天津"),
    ProvinceSeed("Hebei", "河北"),
    ProvinceSeed("Shanxi", "山西"),
    ProvinceSeed("Inner Mongolia", "内蒙古"),
    ProvinceSeed("Liaoning", "辽宁"),
    ProvinceSeed("Jilin", "吉林"),
    ProvinceSeed("Heilongjiang", "黑龙江"),
    ProvinceSeed("Shanghai", "上海"),
    ProvinceSeed("Jiangsu", "江苏"),
    ProvinceSeed("Zhejiang", "浙江"),
    ProvinceSeed("Anhui", "安徽"),
    ProvinceSeed("Fujian", "福建"),
    ProvinceSeed("Jiangxi", "江西"),
    ProvinceSeed("Shandong", "山东"),
    ProvinceSeed("Henan", "河南"),
    ProvinceSeed("Hubei", "湖北"),
    ProvinceSeed("Hunan", "湖南"),
    ProvinceSeed("Guangdong", "广东"),
    ProvinceSeed("Guangxi", "广西"),
    ProvinceSeed("Hainan", "海南"),
    ProvinceSeed("Chongqing", "重庆"),
    ProvinceSeed("Sichuan", "四川"),
    ProvinceSeed("Guizhou", "贵州"),
    ProvinceSeed("Yunnan", "云南"),
    ProvinceSeed("Tibet", "西藏"),
    ProvinceSeed("Shaanxi", "陕西"),
    ProvinceSeed("Gansu", "甘肃"),
    ProvinceSeed("Qinghai", "青海"),
    ProvinceSeed("Ningxia", "宁夏"),
    ProvinceSeed("Xinjiang", "新疆"),
    ProvinceSeed("Hong Kong", "香港"),
    ProvinceSeed("Macao", "澳门"),
    ProvinceSeed("Taiwan", "台湾"),
)
