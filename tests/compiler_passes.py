from ditest.container import ContainerBuilder, Reference


class CollectWithMethodCallsPass:
    def process(self, container: ContainerBuilder) -> None:
        if not container.has_definition("collecting_service_id"):
            return
        collecting = container.get_definition("collecting_service_id")
        for service_id in container.find_tagged_service_ids("collect_with_method_calls"):
            collecting.add_method_call("add", [Reference(service_id)])


class UnguardedCollectPass:
    def process(self, container: ContainerBuilder) -> None:
        collecting = container.get_definition("collecting_service_id")
        for service_id in container.find_tagged_service_ids("collect_with_method_calls"):
            collecting.add_method_call("add", [Reference(service_id)])


class RecordingPass:
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def process(self, container: ContainerBuilder) -> None:
        self.log.append(self.name)

    def __repr__(self) -> str:
        return f"RecordingPass({self.name!r})"
