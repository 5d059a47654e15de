import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Context',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('contextlevel', models.PositiveIntegerField(choices=[(10, 'System'), (30, 'User'), (40, 'Course category'), (50, 'Course'), (70, 'Activity module'), (80, 'Block')])),
                ('instanceid', models.PositiveIntegerField()),
                ('path', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('depth', models.PositiveSmallIntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name='BlockInstance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('blockname', models.CharField(db_index=True, max_length=40)),
                ('showinsubcontexts', models.BooleanField(default=False)),
                ('requiredbytheme', models.BooleanField(default=False)),
                ('pagetypepattern', models.CharField(default='*', max_length=64)),
                ('subpagepattern', models.CharField(blank=True, max_length=16, null=True)),
                ('defaultregion', models.CharField(default='side-pre', max_length=16)),
                ('defaultweight', models.IntegerField(default=0)),
                ('configdata', models.TextField(blank=True, default='')),
                ('timecreated', models.DateTimeField(default=django.utils.timezone.now)),
                ('timemodified', models.DateTimeField(default=django.utils.timezone.now)),
                ('parentcontext', models.ForeignKey(db_column='parentcontextid', on_delete=django.db.models.deletion.CASCADE, related_name='block_instances', to='multiblock.context')),
            ],
            options={
                'ordering': ['defaultregion', 'defaultweight', 'id'],
            },
        ),
        migrations.CreateModel(
            name='BlockPosition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pagetype', models.CharField(default='*', max_length=64)),
                ('subpage', models.CharField(blank=True, default='', max_length=16)),
                ('visible', models.BooleanField(default=True)),
                ('region', models.CharField(max_length=16)),
                ('weight', models.IntegerField(default=0)),
                ('blockinstance', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='positions', to='multiblock.blockinstance')),
                ('context', models.ForeignKey(db_column='contextid', on_delete=django.db.models.deletion.CASCADE, related_name='block_positions', to='multiblock.context')),
            ],
        ),
        migrations.AddConstraint(
            model_name='context',
            constraint=models.UniqueConstraint(fields=('contextlevel', 'instanceid'), name='unique_context_instance'),
        ),
        migrations.AddConstraint(
            model_name='blockposition',
            constraint=models.UniqueConstraint(fields=('context', 'blockinstance'), name='unique_block_position'),
        ),
    ]
