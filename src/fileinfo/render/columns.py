"""Column headers and explanations for each table."""

from __future__ import annotations

from fileinfo.models import ColumnSet, TableSpec

FILE_INFO_EXPLANATION = """\
An inode is a data structure. It defines a file or a directory on the file system and is stored in the directory entry.
Inodes point to blocks that make up a file. The inode contains all the administrative data needed to read a file.
Every file's metadata is stored in inodes in a table structure.
"""

PERMISSIONS_EXPLANATION = """\
On a Linux system, each file and directory is assigned access rights for the owner of the file,
the members of a group of related users, and everybody else. Rights can be assigned to read a file,
to write a file, and to execute a file (i.e., run the file as a program).

r(4) - Allows the contents of the directory to be listed if the x attribute is also set.
w(2) - Allows files within the directory to be created, deleted, or renamed if the x attribute is also set.
x(1) - Allows a directory to be entered (i.e. cd dir).
"""

TABLE_SPECS = {
    ColumnSet.FILE_INFO: TableSpec(
        headers=("Path", "Size(bytes)", "Inode", "Modify"),
        captions=(
            "The path to your file",
            "This is the size of the file in bytes",
            "This is the inode address of the file",
            "This is date since the last time the file was modified",
        ),
        explanation=FILE_INFO_EXPLANATION,
    ),
    ColumnSet.PERMISSIONS: TableSpec(
        headers=("Path", "Permissions(text)", "Permissions(binary)", "Permissions(octal)"),
        captions=(
            "The path to your file",
            "This is the permission of the file written in text format",
            "This is the permission of the file written in binary format",
            "This is the permission of the file written in octal format",
        ),
        explanation=PERMISSIONS_EXPLANATION,
    ),
}
