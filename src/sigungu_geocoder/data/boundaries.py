"""Simplified 시군구 outer boundaries (lon, lat), in catalog order."""

from __future__ import annotations

from typing import List, Tuple

from sigungu_geocoder.data.geometry import Geometry, multipolygon, polygon

SIGUNGU_BOUNDARIES: List[Tuple[str, str, Geometry]] = [
    # 서울특별시
    ("11110", "종로구", polygon(
        (126.950, 37.569), (127.020, 37.569), (127.025, 37.585),
        (127.010, 37.630), (126.960, 37.632), (126.945, 37.600),
    )),
    ("11140", "중구", polygon(
        (126.966, 37.545), (127.000, 37.543), (127.025, 37.552),
        (127.022, 37.568), (126.968, 37.568), (126.963, 37.556),
    )),
    ("11170", "용산구", polygon(
        (126.945, 37.515), (127.010, 37.515), (127.012, 37.540),
        (127.000, 37.542), (126.966, 37.544), (126.950, 37.535),
    )),
    ("11500", "강서구", polygon(
        (126.765, 37.545), (126.800, 37.530), (126.870, 37.540),
        (126.880, 37.565), (126.830, 37.600), (126.790, 37.590),
    )),
    ("11680", "강남구", polygon(
        (127.015, 37.515), (127.050, 37.470), (127.100, 37.460),
        (127.120, 37.490), (127.070, 37.530), (127.030, 37.528),
    )),
    # 부산광역시
    ("26110", "중구", polygon(
        (129.020, 35.095), (129.042, 35.095), (129.045, 35.108),
        (129.030, 35.113), (129.018, 35.105),
    )),
    ("26350", "해운대구", polygon(
        (129.128, 35.155), (129.170, 35.150), (129.215, 35.160),
        (129.230, 35.200), (129.190, 35.245), (129.135, 35.215),
        (129.125, 35.180),
    )),
    ("26440", "강서구", multipolygon(
        polygon(
            (128.830, 35.060), (128.950, 35.060), (128.980, 35.150),
            (128.920, 35.230), (128.850, 35.200),
        ),
        # 가덕도
        polygon((128.800, 35.000), (128.850, 34.990), (128.850, 35.050), (128.810, 35.050)),
    )),
    ("26500", "수영구", polygon(
        (129.095, 35.140), (129.120, 35.138), (129.124, 35.170),
        (129.110, 35.180), (129.092, 35.165),
    )),
    # 인천광역시
    ("28720", "옹진군", multipolygon(
        # 백령도
        polygon((124.620, 37.930), (124.720, 37.920), (124.730, 37.980), (124.660, 38.000), (124.610, 37.970)),
        # 연평도
        polygon((125.660, 37.650), (125.720, 37.650), (125.720, 37.680), (125.670, 37.690)),
        # 덕적도
        polygon((126.100, 37.210), (126.160, 37.210), (126.170, 37.250), (126.120, 37.270)),
    )),
    # 세종특별자치시
    ("36110", "세종특별자치시", polygon(
        (127.150, 36.420), (127.380, 36.420), (127.400, 36.600),
        (127.300, 36.730), (127.180, 36.700), (127.140, 36.550),
    )),
    # 경기도
    ("41117", "수원시 영통구", polygon(
        (127.030, 37.245), (127.080, 37.240), (127.095, 37.270),
        (127.075, 37.300), (127.040, 37.295), (127.025, 37.270),
    )),
    # 강원특별자치도
    ("42110", "춘천시", polygon(
        (127.550, 37.750), (127.850, 37.720), (127.900, 37.900),
        (127.800, 38.050), (127.600, 38.000), (127.520, 37.880),
    )),
    # 제주특별자치도
    ("50110", "제주시", multipolygon(
        polygon((126.140, 33.330), (126.970, 33.400), (126.950, 33.560), (126.550, 33.540), (126.250, 33.480)),
        # 추자도
        polygon((126.280, 33.930), (126.350, 33.920), (126.360, 33.970), (126.300, 33.980)),
    )),
    ("50130", "서귀포시", polygon(
        (126.160, 33.200), (126.950, 33.240), (126.970, 33.390), (126.140, 33.320),
    )),
]
