# illumiocli

A small Python client for the REST API of an Illumio Policy Compute Engine
(PCE). It covers:

- listing container clusters,
- listing the container workload profiles of a cluster and updating one,
- looking up virtual services by a query parameter.

Responses come back as dataclasses from `illumiocli.models`.

## Installation

```
pip install illumiocli
```

## Usage

```python
from illumiocli.models import ContainerWorkloadProfile, Href
from illumiocli.pce import APIError, new_pce

pce = new_pce("https://pce.example.com:8443", "api_user", "placeholder", "v2")

# Container clusters
for cluster in pce.get_container_clusters():
    print(cluster.name, cluster.manager_type, "online" if cluster.online else "offline")

    # Container workload profiles of one cluster
    for profile in pce.get_container_workload_profiles_by_container_cluster_href(cluster.href):
        print("  ", profile.namespace, profile.enforcement_mode)

# Update the labels a profile assigns
update = ContainerWorkloadProfile(assign_labels=[Href(href="/orgs/1/labels/1001")])
pce.put_container_workload_profile_by_href(
    "/orgs/1/container_clusters/<cluster-id>/container_workload_profiles/<profile-id>",
    update,
)

# Virtual services in the active policy whose name matches
for service in pce.get_virtual_services_by_parameter("name", "example", "active"):
    print(service.name, [port.port for port in service.service_ports])
```

`new_pce(host, user, key, version)` returns a `PCE`; the `PCE` dataclass can
also be built directly with the same four fields. Requests go to
`PCE.base_url`, which is `<host>/api/<version>`, and authenticate with HTTP
basic auth using the API user and key. An href given to a method is appended
to that base URL, unless it is already a full `http://` or `https://` URL.

The methods of `PCE`:

- `get_container_clusters()` – every container cluster under `/orgs/1`, as a
  list of `ContainerCluster`.
- `get_container_workload_profiles_by_container_cluster_href(href)` – the
  profiles at `<href>/container_workload_profiles`, as a list of
  `ContainerWorkloadProfile`.
- `put_container_workload_profile_by_href(href, profile)` – sends
  `profile.to_dict()` as JSON with a PUT and returns the profile the server
  sent back. When the answer has no JSON body (for example `204 No Content`),
  a `ContainerWorkloadProfile` with all fields at their defaults is returned.
- `get_virtual_services_by_parameter(key, value, pversion)` – the virtual
  services at `/orgs/1/sec_policy/<pversion>/virtual_services?<key>=<value>`,
  as a list of `VirtualService`.

A list call whose answer has no JSON body returns an empty list.

## Errors

When the PCE answers with a status above 399, the call raises `APIError`,
which carries `status_code`, `status` and `body`. Its message holds the status
and, when the server sent one, the response body:

```
API error: status 403 - 403 Forbidden
API error: status 400 - 400 Bad Request - {"error": "pversion is invalid"}
```

Network failures are raised as the underlying `requests` exceptions.

## Models

`illumiocli.models` holds `ContainerCluster`, `Node`, `ClusterError`,
`ContainerWorkloadProfile`, `ContainerWorkloadProfileLabel`,
`ContainerWorkloadProfileLabelAssignment`, `Href`, `VirtualService`,
`VirtualServiceServicePort`, `VirtualServiceLabel` and
`VirtualServiceServiceAddress`.

Every model has `from_dict(data)` to build it from decoded JSON and
`to_dict()` to turn it back into a JSON-ready dictionary. Keys missing from
the data, or set to `null`, take the field's default (empty string, `False`,
`0` or empty list); fields typed as optional stay `None`. Keys the model does
not know are ignored.

`ContainerCluster`, `Node` and `ClusterError` write every field in
`to_dict()`. The other models leave out empty fields and optional fields that
are `None`, so a profile holding only `assign_labels` is sent as just that
field.

## What it does not do

Despite its name the package has no command-line program; it is a library to
be called from Python. It only reads container clusters, reads and updates
container workload profiles and reads virtual services; other PCE resources,
paging and organisations other than `/orgs/1` are not covered.

## Running the tests

```
pip install -e ".[test]"
pytest
```