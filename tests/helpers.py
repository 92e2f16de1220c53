"""Canned DescribeInstances data shared by the tests."""


def make_instance(name=None, key_name="mykey", public_dns="ec2-1-2-3-4.compute.amazonaws.com",
                  public_ip="1.2.3.4", instance_id="i-0123456789abcdef0", extra_tags=None):
    """Build a raw instance dict shaped like a DescribeInstances record."""
    tags = list(extra_tags or [])
    if name is not None:
        tags.append({"Key": "Name", "Value": name})

    instance = {
        "InstanceId": instance_id,
        "KeyName": key_name,
        "PublicDnsName": public_dns,
        "PublicIpAddress": public_ip,
    }
    if tags:
        instance["Tags"] = tags
    return instance


def make_reservations(*groups):
    """Wrap lists of instances into reservations."""
    return [{"ReservationId": f"r-{idx:04d}", "Instances": list(group)} for idx, group in enumerate(groups)]


class FakeLister:
    """Stand-in for EC2Client returning canned reservations."""

    def __init__(self, reservations=None, error=None):
        self.reservations = reservations or []
        self.error = error
        self.calls = 0

    def describe_instances(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.reservations
