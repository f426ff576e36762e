"""Joint hierarchies, skeletal animation and skinning palettes."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from enginekit.animation import Animation, calculate_value
from enginekit.matrix import Matrix, identity
from enginekit.transform import QuaternionTransform

MAX_INFLUENCE = 4


@dataclass
class Node:
    """A node of a model's scene hierarchy."""

    name: str = ""
    transform: QuaternionTransform = field(default_factory=QuaternionTransform)
    local_matrix: Matrix = field(default_factory=Matrix)
    children: list[Node] = field(default_factory=list)


@dataclass
class Joint:
    """One joint of a skeleton, referring to its relatives by index."""

    name: str
    index: int
    transform: QuaternionTransform = field(default_factory=QuaternionTransform)
    local_matrix: Matrix = field(default_factory=Matrix)
    skeleton_space_matrix: Matrix = field(default_factory=Matrix)
    children: list[int] = field(default_factory=list)
    parent: Optional[int] = None


@dataclass
class Skeleton:
    """Joints in depth-first order, with a name-to-index map."""

    root: int = 0
    joint_map: dict[str, int] = field(default_factory=dict)
    joints: list[Joint] = field(default_factory=list)

    def update(self) -> None:
        """Recompute every joint's local and skeleton-space matrices."""
        for joint in self.joints:
            joint.local_matrix = joint.transform.make_affine_matrix()
            if joint.parent is not None:
                parent_matrix = self.joints[joint.parent].skeleton_space_matrix
                joint.skeleton_space_matrix = joint.local_matrix * parent_matrix
            else:
                joint.skeleton_space_matrix = joint.local_matrix

    def apply_animation(self, animation: Animation, animation_time: float) -> None:
        """Set the transform of every animated joint to its value at ``animation_time``."""
        for joint in self.joints:
            node_animation = animation.node_animations.get(joint.name)
            if node_animation is None:
                continue
            joint.transform.translate = calculate_value(node_animation.translate, animation_time)
            joint.transform.rotate = calculate_value(node_animation.rotate, animation_time)
            joint.transform.scale = calculate_value(node_animation.scale, animation_time)


@dataclass(frozen=True)
class VertexWeight:
    """How strongly a joint influences one vertex."""

    weight: float
    vertex_index: int


@dataclass
class JointWeightData:
    """A joint's inverse bind pose and the vertices it influences."""

    inverse_bind_pose_matrix: Matrix = field(default_factory=Matrix)
    vertex_weights: list[VertexWeight] = field(default_factory=list)


@dataclass
class VertexInfluence:
    """Up to four joint weights for one vertex; a zero weight marks a free slot."""

    weights: list[float] = field(default_factory=lambda: [0.0] * MAX_INFLUENCE)
    joint_indices: list[int] = field(default_factory=lambda: [0] * MAX_INFLUENCE)


@dataclass(frozen=True)
class PaletteEntry:
    """Skinning matrices of one joint: for positions and for normals."""

    skeleton_space_matrix: Matrix = field(default_factory=Matrix)
    skeleton_space_inverse_transpose_matrix: Matrix = field(default_factory=Matrix)


@dataclass
class SkinCluster:
    """Per-vertex joint influences and the per-joint matrix palette."""

    inverse_bind_pose_matrices: list[Matrix] = field(default_factory=list)
    influences: list[VertexInfluence] = field(default_factory=list)
    palette: list[PaletteEntry] = field(default_factory=list)

    def update(self, skeleton: Skeleton) -> None:
        """Rebuild the palette from the skeleton's current pose."""
        if len(skeleton.joints) > len(self.inverse_bind_pose_matrices):
            raise ValueError("skeleton has more joints than the skin cluster")
        for joint_index, joint in enumerate(skeleton.joints):
            matrix = self.inverse_bind_pose_matrices[joint_index] * joint.skeleton_space_matrix
            self.palette[joint_index] = PaletteEntry(
                skeleton_space_matrix=matrix,
                skeleton_space_inverse_transpose_matrix=matrix.inverse().transpose(),
            )


def create_joint(node: Node, parent: Optional[int], joints: list[Joint]) -> int:
    """Append a joint for ``node`` and its descendants to ``joints``; return its index."""
    joint = Joint(
        name=node.name,
        index=len(joints),
        transform=dataclasses.replace(node.transform),
        local_matrix=node.local_matrix,
        skeleton_space_matrix=identity(),
        parent=parent,
    )
    joints.append(joint)
    for child in node.children:
        joint.children.append(create_joint(child, joint.index, joints))
    return joint.index


def create_skeleton(root_node: Node) -> Skeleton:
    """Build a skeleton from a node hierarchy and compute its initial pose."""
    skeleton = Skeleton()
    skeleton.root = create_joint(root_node, None, skeleton.joints)
    for joint in skeleton.joints:
        skeleton.joint_map.setdefault(joint.name, joint.index)
    skeleton.update()
    return skeleton


def create_skin_cluster(
    skeleton: Skeleton,
    skin_cluster_data: Mapping[str, JointWeightData],
    vertex_count: int,
) -> SkinCluster:
    """Assign joint weights to vertices; joints missing from the skeleton are ignored."""
    joint_count = len(skeleton.joints)
    cluster = SkinCluster(
        inverse_bind_pose_matrices=[identity() for _ in range(joint_count)],
        influences=[VertexInfluence() for _ in range(vertex_count)],
        palette=[PaletteEntry() for _ in range(joint_count)],
    )

    for joint_name, joint_weight in sorted(skin_cluster_data.items()):
        joint_index = skeleton.joint_map.get(joint_name)
        if joint_index is None:
            continue
        cluster.inverse_bind_pose_matrices[joint_index] = joint_weight.inverse_bind_pose_matrix
        for vertex_weight in joint_weight.vertex_weights:
            influence = cluster.influences[vertex_weight.vertex_index]
            for slot, weight in enumerate(influence.weights):
                if weight == 0.0:
                    influence.weights[slot] = vertex_weight.weight
                    influence.joint_indices[slot] = joint_index
                    break

    return cluster