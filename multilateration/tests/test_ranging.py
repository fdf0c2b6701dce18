import math

from multilateration.core.ranging import RSSI_AT_ONE_METER, rssi_to_distance, rssi_variance_to_distance_variance


def test_reference_rssi_is_one_meter():
    for n in (2.0, 3.0, 4.5):
        assert abs(rssi_to_distance(RSSI_AT_ONE_METER, n) - 1.0) < 1e-12


def test_path_loss_distance():
    # 30 dB below the 1 m reference with n=3 is one decade
    assert abs(rssi_to_distance(-70.0, 3.0) - 10.0) < 1e-9
    assert abs(rssi_to_distance(-60.0, 2.0) - 10.0) < 1e-9


def test_distance_variance_grows_with_distance():
    near = rssi_variance_to_distance_variance(-50.0, 3.0)
    far = rssi_variance_to_distance_variance(-80.0, 3.0)
    assert far > near > 0.0
    expected = (math.log(10.0) / 30.0 * 10.0) ** 2 * 4.0
    assert abs(rssi_variance_to_distance_variance(-70.0, 3.0) - expected) < 1e-9
